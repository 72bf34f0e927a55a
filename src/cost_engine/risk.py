"""Expected cost of a failed hire."""

import logging

from src.cost_engine.models import BadHireScenario, CostConfig
from src.cost_engine.pay import employer_cost_from_monthly_gross

logger = logging.getLogger(__name__)


def compute_bad_hire_scenario(
    hire_monthly_gross: float,
    repeated_services_cost: float,
    config: CostConfig,
) -> BadHireScenario:
    """Fixed-probability, fixed-magnitude loss if the hire does not work out.

    The loss is the employer cost of paying the hire for
    ``config.bad_hire_pay_months`` plus every service that has to be bought
    again; its expected value is weighted by ``config.bad_hire_risk_rate``.
    """
    employer_monthly_cost = employer_cost_from_monthly_gross(
        hire_monthly_gross, config.social_tax_rate, config.employer_ui_rate
    )
    salary_cost = employer_monthly_cost * config.bad_hire_pay_months
    extra_if_happens = salary_cost + repeated_services_cost
    expected = extra_if_happens * config.bad_hire_risk_rate

    logger.debug(
        "Bad hire: salary=%.2f extra=%.2f expected=%.2f (rate=%s)",
        salary_cost,
        extra_if_happens,
        expected,
        config.bad_hire_risk_rate,
    )
    return BadHireScenario(
        bad_hire_salary_cost=salary_cost,
        bad_hire_extra_if_happens=extra_if_happens,
        expected_risk_cost=expected,
    )
