"""Entry point of the hiring cost engine.

:func:`compute_totals` recomputes everything from scratch for a snapshot of
inputs and config. It never mutates its arguments and never rounds; two
calls with equal arguments return equal results.
"""

import logging

from src.cost_engine.aggregation import aggregate
from src.cost_engine.blocks import compute_block_costs
from src.cost_engine.models import (
    CalculatorInputs,
    ComputedResult,
    CostConfig,
    DefaultsUsed,
    NormalizedRoles,
    RoleType,
)
from src.cost_engine.pay import normalize_hire_pay, normalize_role_pay
from src.cost_engine.range_warnings import (
    compute_missing_pay_warnings,
    compute_range_warnings,
)
from src.cost_engine.risk import compute_bad_hire_scenario
from src.cost_engine.services import compute_services_cost

logger = logging.getLogger(__name__)


def normalize_roles(inputs: CalculatorInputs, config: CostConfig) -> NormalizedRoles:
    return NormalizedRoles(
        hr=normalize_role_pay(inputs.roles.hr, RoleType.HR, config),
        manager=normalize_role_pay(inputs.roles.manager, RoleType.MANAGER, config),
        team=normalize_role_pay(inputs.roles.team, RoleType.TEAM, config),
    )


def compute_totals(inputs: CalculatorInputs, config: CostConfig) -> ComputedResult:
    """Compute the full cost estimate for one hire."""
    hire_pay = normalize_hire_pay(inputs.hire_pay, config)
    roles = normalize_roles(inputs, config)

    services = compute_services_cost(inputs.other_services, config)
    bad_hire = compute_bad_hire_scenario(
        hire_pay.monthly_gross, services.repeated_services_cost, config
    )

    block_costs = compute_block_costs(inputs, hire_pay, roles, services, bad_hire)
    base_cost, percentages, top_drivers = aggregate(block_costs)

    result = ComputedResult(
        normalized_hire_pay=hire_pay,
        normalized_roles=roles,
        block_costs=block_costs,
        base_cost=base_cost,
        expected_risk_cost=bad_hire.expected_risk_cost,
        total_cost=base_cost,
        total_cost_with_risk=base_cost + bad_hire.expected_risk_cost,
        bad_hire_salary_cost=bad_hire.bad_hire_salary_cost,
        bad_hire_extra_if_happens=bad_hire.bad_hire_extra_if_happens,
        top_drivers=top_drivers,
        percentages=percentages,
        defaults_used=DefaultsUsed(
            hire_pay=hire_pay.is_default,
            hr_pay=roles.hr.is_default,
            manager_pay=roles.manager.is_default,
            team_pay=roles.team.is_default,
        ),
        missing_pay_warnings=compute_missing_pay_warnings(hire_pay),
        range_warnings=compute_range_warnings(inputs, config),
    )

    logger.debug(
        "Computed totals for %r: base=%.2f risk=%.2f warnings=%d",
        inputs.position_title,
        result.base_cost,
        result.expected_risk_cost,
        len(result.range_warnings),
    )
    return result
