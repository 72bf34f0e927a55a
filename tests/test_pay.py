"""Tests for pay normalization and employer tax cost."""

import pytest

from src.cost_engine.models import (
    CostConfig,
    PayDescriptor,
    PayType,
    RoleDescriptor,
    RoleType,
)
from src.cost_engine.pay import (
    employer_cost_from_monthly_gross,
    employer_hourly_rate,
    gross_hourly_rate,
    monthly_gross_base,
    normalize_hire_pay,
    normalize_role_pay,
)

TAX_FACTOR = 1 + 0.33 + 0.008


# ── monthly_gross_base ───────────────────────────────────────────────

class TestMonthlyGrossBase:
    @pytest.mark.parametrize("amount", [0, 2000, -5])
    def test_unset_is_zero(self, amount):
        assert monthly_gross_base(PayType.UNSET, amount, 160, 168) == 0

    def test_monthly_returns_amount(self):
        assert monthly_gross_base(PayType.MONTHLY, 2500, 168, 168) == 2500

    def test_hourly_uses_given_hours(self):
        assert monthly_gross_base(PayType.HOURLY, 15, 160, 168) == 2400

    def test_hourly_falls_back_to_default_hours(self):
        assert monthly_gross_base(PayType.HOURLY, 15, 0, 168) == 15 * 168
        assert monthly_gross_base(PayType.HOURLY, 15, -10, 168) == 15 * 168

    def test_non_positive_amount_is_zero(self):
        assert monthly_gross_base(PayType.MONTHLY, 0, 168, 168) == 0
        assert monthly_gross_base(PayType.MONTHLY, -100, 168, 168) == 0


# ── Employer cost ────────────────────────────────────────────────────

class TestEmployerCost:
    def test_adds_social_tax_and_ui(self):
        assert employer_cost_from_monthly_gross(2000, 0.33, 0.008) == pytest.approx(2676)

    def test_zero_gross(self):
        assert employer_cost_from_monthly_gross(0, 0.33, 0.008) == 0

    def test_employer_hourly_rate_includes_taxes(self, tax_config):
        pay = PayDescriptor(PayType.MONTHLY, 2000, 168)
        assert employer_hourly_rate(pay, tax_config) == pytest.approx(2000 * TAX_FACTOR / 168)

    def test_employer_hourly_rate_for_hourly_pay(self, tax_config):
        pay = PayDescriptor(PayType.HOURLY, 20, 160)
        assert employer_hourly_rate(pay, tax_config) == pytest.approx(20 * TAX_FACTOR)

    def test_employer_hourly_rate_unset_is_zero(self, tax_config):
        assert employer_hourly_rate(PayDescriptor(PayType.UNSET, 2000), tax_config) == 0

    def test_gross_hourly_rate(self):
        assert gross_hourly_rate(PayDescriptor(PayType.HOURLY, 20, 168), 168) == 20
        assert gross_hourly_rate(PayDescriptor(PayType.MONTHLY, 1680, 168), 168) == pytest.approx(10)
        assert gross_hourly_rate(PayDescriptor(PayType.UNSET, 2000, 168), 168) == 0


# ── normalize_hire_pay ───────────────────────────────────────────────

class TestNormalizeHirePay:
    def test_unset_uses_average_wage(self, tax_config):
        result = normalize_hire_pay(PayDescriptor(), tax_config)
        assert result.is_default is True
        assert result.monthly_gross == 2075

    def test_zero_amount_is_default(self, tax_config):
        result = normalize_hire_pay(PayDescriptor(PayType.MONTHLY, 0), tax_config)
        assert result.is_default is True
        assert result.monthly_gross == 2075

    def test_uses_provided_monthly_pay(self, tax_config):
        result = normalize_hire_pay(PayDescriptor(PayType.MONTHLY, 3000), tax_config)
        assert result.is_default is False
        assert result.monthly_gross == 3000

    def test_all_rates(self, tax_config):
        result = normalize_hire_pay(PayDescriptor(PayType.MONTHLY, 2000), tax_config)
        assert result.gross_hourly_rate == pytest.approx(2000 / 168)
        assert result.employer_monthly_cost == pytest.approx(2000 * TAX_FACTOR)
        assert result.employer_hourly_rate == pytest.approx(2000 * TAX_FACTOR / 168)

    def test_hourly_pay_with_own_hours(self, tax_config):
        result = normalize_hire_pay(PayDescriptor(PayType.HOURLY, 15, 160), tax_config)
        assert result.monthly_gross == 2400
        assert result.gross_hourly_rate == pytest.approx(15)
        assert result.employer_hourly_rate == pytest.approx(15 * TAX_FACTOR)

    def test_zero_hours_falls_back_to_config(self, tax_config):
        result = normalize_hire_pay(PayDescriptor(PayType.MONTHLY, 1680, 0), tax_config)
        assert result.gross_hourly_rate == pytest.approx(10)

    def test_employer_cost_invariant(self):
        config = CostConfig(social_tax_rate=0.2, employer_ui_rate=0.05)
        result = normalize_hire_pay(PayDescriptor(PayType.MONTHLY, 1000), config)
        assert result.employer_monthly_cost == pytest.approx(result.monthly_gross * 1.25)

    def test_round_trip_of_default_gross(self, tax_config):
        first = normalize_hire_pay(PayDescriptor(), tax_config)
        again = normalize_hire_pay(
            PayDescriptor(PayType.MONTHLY, first.monthly_gross), tax_config
        )
        assert again.is_default is False
        assert again.monthly_gross == first.monthly_gross
        assert again.gross_hourly_rate == pytest.approx(first.gross_hourly_rate)
        assert again.employer_hourly_rate == pytest.approx(first.employer_hourly_rate)
        assert again.employer_monthly_cost == pytest.approx(first.employer_monthly_cost)


# ── normalize_role_pay ───────────────────────────────────────────────

class TestNormalizeRolePay:
    def test_disabled_role_is_all_zero(self, config):
        role = RoleDescriptor(PayType.MONTHLY, 4000, enabled=False)
        result = normalize_role_pay(role, RoleType.MANAGER, config)
        assert result.monthly_gross == 0
        assert result.gross_hourly_rate == 0
        assert result.employer_hourly_rate == 0
        assert result.employer_monthly_cost == 0

    @pytest.mark.parametrize("role", list(RoleType))
    def test_unset_role_uses_role_default(self, role):
        config = CostConfig(
            role_default_salaries={"hr": 1800, "manager": 3600, "team": 2400}
        )
        result = normalize_role_pay(RoleDescriptor(), role, config)
        assert result.is_default is True
        assert result.monthly_gross == config.role_default_salaries[role.value]

    def test_role_defaults_differ_from_average_wage(self, config):
        manager = normalize_role_pay(RoleDescriptor(), RoleType.MANAGER, config)
        hr = normalize_role_pay(RoleDescriptor(), RoleType.HR, config)
        assert manager.monthly_gross != hr.monthly_gross

    def test_explicit_role_pay(self, tax_config):
        role = RoleDescriptor(PayType.HOURLY, 25, 168)
        result = normalize_role_pay(role, RoleType.TEAM, tax_config)
        assert result.is_default is False
        assert result.monthly_gross == 25 * 168
        assert result.employer_hourly_rate == pytest.approx(25 * TAX_FACTOR)
