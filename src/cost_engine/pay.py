"""Pay normalization and employer tax cost.

Turns a possibly blank pay descriptor into canonical monthly and hourly
figures. Blank or non-positive pay is replaced with a configured default so
every downstream calculation has a rate to work with; ``is_default`` records
when that happened.
"""

import logging
from typing import Optional

from src.cost_engine.models import (
    CostConfig,
    NormalizedPay,
    PayDescriptor,
    PayType,
    RoleDescriptor,
    RoleType,
)

logger = logging.getLogger(__name__)


def employer_cost_from_monthly_gross(
    monthly_gross: float, social_tax_rate: float, employer_ui_rate: float
) -> float:
    """Gross pay plus employer social tax and unemployment insurance."""
    return monthly_gross * (1 + social_tax_rate + employer_ui_rate)


def _effective_hours(hours_per_month: Optional[float], default_hours: float) -> float:
    if hours_per_month is not None and hours_per_month > 0:
        return hours_per_month
    return default_hours


def monthly_gross_base(
    pay_type: PayType,
    pay_amount: float,
    hours_per_month: float,
    default_hours: float,
) -> float:
    """Monthly gross for a pay entry; hourly pay is scaled by monthly hours."""
    if pay_type == PayType.UNSET or pay_amount <= 0:
        return 0.0
    if pay_type == PayType.MONTHLY:
        return pay_amount
    return pay_amount * _effective_hours(hours_per_month, default_hours)


def employer_hourly_rate(pay: PayDescriptor, config: CostConfig) -> float:
    """Hourly cost of *pay* to the employer, without default substitution."""
    hours = _effective_hours(pay.hours_per_month, config.hours_per_month)
    monthly_gross = monthly_gross_base(
        pay.pay_type, pay.pay_amount, hours, config.hours_per_month
    )
    if monthly_gross <= 0:
        return 0.0
    employer_cost = employer_cost_from_monthly_gross(
        monthly_gross, config.social_tax_rate, config.employer_ui_rate
    )
    return employer_cost / hours


def gross_hourly_rate(pay: PayDescriptor, default_hours: float) -> float:
    """Hourly gross wage of *pay* (no employer taxes)."""
    if pay.pay_type == PayType.HOURLY and pay.pay_amount > 0:
        return pay.pay_amount
    hours = _effective_hours(pay.hours_per_month, default_hours)
    monthly_gross = monthly_gross_base(
        pay.pay_type, pay.pay_amount, hours, default_hours
    )
    if monthly_gross <= 0:
        return 0.0
    return monthly_gross / hours


def _normalize(
    pay: PayDescriptor, default_amount: float, config: CostConfig
) -> NormalizedPay:
    is_default = pay.is_default_eligible()

    if is_default:
        pay_type = PayType.MONTHLY
        pay_amount = default_amount
        hours_per_month = config.hours_per_month
    else:
        pay_type = pay.pay_type
        pay_amount = pay.pay_amount
        hours_per_month = (
            pay.hours_per_month
            if pay.hours_per_month is not None
            else config.hours_per_month
        )

    monthly_gross = monthly_gross_base(
        pay_type, pay_amount, hours_per_month, config.hours_per_month
    )
    employer_monthly_cost = employer_cost_from_monthly_gross(
        monthly_gross, config.social_tax_rate, config.employer_ui_rate
    )
    hours = _effective_hours(hours_per_month, config.hours_per_month)

    return NormalizedPay(
        monthly_gross=monthly_gross,
        gross_hourly_rate=monthly_gross / hours,
        employer_hourly_rate=employer_monthly_cost / hours,
        employer_monthly_cost=employer_monthly_cost,
        is_default=is_default,
    )


def normalize_hire_pay(pay: PayDescriptor, config: CostConfig) -> NormalizedPay:
    """Normalize the hire's pay, falling back to the average wage."""
    normalized = _normalize(pay, config.average_wage, config)
    if normalized.is_default:
        logger.debug(
            "Hire pay not set, using average wage %.2f", config.average_wage
        )
    return normalized


def normalize_role_pay(
    role_pay: RoleDescriptor, role: RoleType, config: CostConfig
) -> NormalizedPay:
    """Normalize a participating role's pay.

    A disabled role contributes nothing. A blank pay falls back to the
    role's own default salary rather than the generic average wage.
    """
    if not role_pay.enabled:
        return NormalizedPay.zero()

    default_salary = config.role_default_salary(role)
    normalized = _normalize(role_pay, default_salary, config)
    if normalized.is_default:
        logger.debug(
            "%s pay not set, using default salary %.2f",
            RoleType(role).value,
            default_salary,
        )
    return normalized
