"""Tests for the bad hire risk scenario."""

import pytest

from src.cost_engine.models import CostConfig
from src.cost_engine.risk import compute_bad_hire_scenario


class TestBadHireScenario:
    def test_worked_example(self, tax_config):
        result = compute_bad_hire_scenario(2000, 500, tax_config)
        assert result.bad_hire_salary_cost == pytest.approx(5352)
        assert result.bad_hire_extra_if_happens == pytest.approx(5852)
        assert result.expected_risk_cost == pytest.approx(877.8)

    def test_zero_risk_rate(self):
        config = CostConfig(bad_hire_risk_rate=0.0)
        result = compute_bad_hire_scenario(2000, 500, config)
        assert result.expected_risk_cost == 0
        assert result.bad_hire_extra_if_happens > 0

    def test_repeated_services_add_linearly(self, tax_config):
        without = compute_bad_hire_scenario(2000, 0, tax_config)
        with_services = compute_bad_hire_scenario(2000, 1000, tax_config)
        diff = with_services.expected_risk_cost - without.expected_risk_cost
        assert diff == pytest.approx(1000 * 0.15)

    def test_pay_months_scale_salary_cost(self):
        config = CostConfig(bad_hire_pay_months=3, social_tax_rate=0.0, employer_ui_rate=0.0)
        result = compute_bad_hire_scenario(1000, 0, config)
        assert result.bad_hire_salary_cost == 3000
