"""Short explanations for the blocks that drive the cost."""

from typing import Dict, List

from src.cost_engine.models import BlockName, ComputedResult

# Where a block's cost mainly comes from: hours spent, money spent, or both
BLOCK_METADATA: Dict[BlockName, Dict[str, bool]] = {
    BlockName.STRATEGY_PREP: {"time_based": True, "cost_based": False},
    BlockName.ADS_BRANDING: {"time_based": True, "cost_based": True},
    BlockName.CANDIDATE_MGMT: {"time_based": True, "cost_based": True},
    BlockName.INTERVIEWS: {"time_based": True, "cost_based": True},
    BlockName.BACKGROUND_OFFER: {"time_based": True, "cost_based": True},
    BlockName.OTHER_SERVICES: {"time_based": False, "cost_based": True},
    BlockName.PREBOARDING: {"time_based": True, "cost_based": True},
    BlockName.ONBOARDING: {"time_based": False, "cost_based": False},
    BlockName.VACANCY: {"time_based": False, "cost_based": False},
    BlockName.INDIRECT_COSTS: {"time_based": True, "cost_based": False},
    BlockName.EXPECTED_RISK: {"time_based": False, "cost_based": False},
}

BASE_INSIGHT = "This is one of the largest cost sources in this hiring process."

_SPECIAL_INSIGHTS = {
    BlockName.ONBOARDING: "The impact comes from lost productivity while the hire ramps up.",
    BlockName.VACANCY: "An unfilled position directly affects business performance.",
    BlockName.EXPECTED_RISK: "This is a risk-weighted estimate of the cost of a bad hire.",
}


def driver_insight(block: BlockName) -> str:
    """One or two sentences explaining why *block* is a top driver."""
    meta = BLOCK_METADATA.get(BlockName(block))
    if meta is None:
        return BASE_INSIGHT

    if meta["time_based"] and not meta["cost_based"]:
        return f"{BASE_INSIGHT} Most of it is time spent by the people involved."
    if meta["cost_based"] and not meta["time_based"]:
        return f"{BASE_INSIGHT} It depends on the chosen solutions and service volume."
    if meta["time_based"] and meta["cost_based"]:
        return f"{BASE_INSIGHT} It includes both time and direct costs."

    special = _SPECIAL_INSIGHTS.get(BlockName(block))
    if special:
        return f"{BASE_INSIGHT} {special}"
    return BASE_INSIGHT


def top_driver_insights(result: ComputedResult) -> List[Dict]:
    """Top drivers of *result* paired with their explanation."""
    return [
        {
            "block": driver.block.value,
            "label": driver.label,
            "amount": driver.amount,
            "percentage": driver.percentage,
            "insight": driver_insight(driver.block),
        }
        for driver in result.top_drivers
    ]
