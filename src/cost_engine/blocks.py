"""Per-phase block costs.

Each hiring phase becomes a :class:`BlockCost` made of time spent by the
participating roles and money spent directly. Hours and days are clamped to
zero before use.
"""

import logging
from typing import Dict

from src.cost_engine.models import (
    BadHireScenario,
    BlockCost,
    BlockHours,
    BlockName,
    CalculatorInputs,
    NormalizedPay,
    NormalizedRoles,
    ServicesCost,
)

logger = logging.getLogger(__name__)


def _hours(value: float) -> float:
    return max(0.0, value)


def compute_block_time_cost(hours: BlockHours, roles: NormalizedRoles) -> float:
    """Time cost of a block at employer hourly rates."""
    return (
        _hours(hours.hr_hours) * roles.hr.employer_hourly_rate
        + _hours(hours.manager_hours) * roles.manager.employer_hourly_rate
        + _hours(hours.team_hours) * roles.team.employer_hourly_rate
    )


def compute_indirect_block_time_cost(
    hours: BlockHours, roles: NormalizedRoles
) -> float:
    """Time cost of the indirect-costs block at gross hourly rates.

    Indirect time is lost attention rather than paid extra work, so it is
    valued at the wage alone, without employer payroll taxes.
    """
    return (
        _hours(hours.hr_hours) * roles.hr.gross_hourly_rate
        + _hours(hours.manager_hours) * roles.manager.gross_hourly_rate
        + _hours(hours.team_hours) * roles.team.gross_hourly_rate
    )


def onboarding_productivity_loss_cost(
    hire_employer_monthly_cost: float,
    onboarding_months: float,
    productivity_pct: float,
) -> float:
    """Cost of the output not delivered while the hire ramps up."""
    if onboarding_months <= 0 or productivity_pct >= 100:
        return 0.0
    loss_rate = (100 - max(0.0, min(100.0, productivity_pct))) / 100
    return hire_employer_monthly_cost * onboarding_months * loss_rate


def vacancy_cost(daily_cost: float, vacancy_days: float) -> float:
    return daily_cost * max(0.0, vacancy_days)


def preboarding_time_cost(
    it_setup_hours: float, prep_hours: float, roles: NormalizedRoles
) -> float:
    """IT setup is done by the team, preparation by HR."""
    return (
        _hours(it_setup_hours) * roles.team.employer_hourly_rate
        + _hours(prep_hours) * roles.hr.employer_hourly_rate
    )


def compute_block_costs(
    inputs: CalculatorInputs,
    hire_pay: NormalizedPay,
    roles: NormalizedRoles,
    services: ServicesCost,
    bad_hire: BadHireScenario,
) -> Dict[BlockName, BlockCost]:
    """Build the cost of every block, in :class:`BlockName` order."""
    onboarding = inputs.onboarding
    onboarding_direct = (
        onboarding_productivity_loss_cost(
            hire_pay.employer_monthly_cost,
            onboarding.onboarding_months,
            onboarding.productivity_pct,
        )
        + onboarding.extra_costs
    )

    costs = {
        BlockName.STRATEGY_PREP: BlockCost(
            time_cost=compute_block_time_cost(inputs.strategy_prep, roles),
            direct_cost=0.0,
        ),
        BlockName.ADS_BRANDING: BlockCost(
            time_cost=compute_block_time_cost(inputs.ads_branding, roles),
            direct_cost=inputs.ads_branding.direct_costs,
        ),
        BlockName.CANDIDATE_MGMT: BlockCost(
            time_cost=compute_block_time_cost(inputs.candidate_mgmt, roles),
            direct_cost=inputs.candidate_mgmt.tests_cost,
        ),
        BlockName.INTERVIEWS: BlockCost(
            time_cost=compute_block_time_cost(inputs.interviews, roles),
            direct_cost=inputs.interviews.direct_costs,
        ),
        BlockName.BACKGROUND_OFFER: BlockCost(
            time_cost=compute_block_time_cost(inputs.background_offer, roles),
            direct_cost=inputs.background_offer.direct_costs,
        ),
        BlockName.OTHER_SERVICES: BlockCost(
            time_cost=0.0,
            direct_cost=services.total_services_cost,
        ),
        BlockName.PREBOARDING: BlockCost(
            time_cost=preboarding_time_cost(
                inputs.preboarding.it_setup_hours,
                inputs.preboarding.prep_hours,
                roles,
            ),
            direct_cost=inputs.preboarding.devices_cost,
        ),
        BlockName.ONBOARDING: BlockCost(
            time_cost=0.0,
            direct_cost=onboarding_direct,
        ),
        BlockName.VACANCY: BlockCost(
            time_cost=0.0,
            direct_cost=vacancy_cost(
                inputs.vacancy.daily_cost, inputs.vacancy.vacancy_days
            ),
        ),
        BlockName.INDIRECT_COSTS: BlockCost(
            time_cost=compute_indirect_block_time_cost(inputs.indirect_costs, roles),
            direct_cost=0.0,
        ),
        BlockName.EXPECTED_RISK: BlockCost(
            time_cost=0.0,
            direct_cost=bad_hire.expected_risk_cost,
        ),
    }

    logger.debug(
        "Block totals: %s",
        {name.value: round(cost.total, 2) for name, cost in costs.items()},
    )
    return costs
