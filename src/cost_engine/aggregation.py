"""Totals, percentage shares and top cost drivers."""

import logging
from typing import Dict, List, Tuple

from src.cost_engine.config import BLOCK_LABELS, TOP_DRIVER_COUNT
from src.cost_engine.models import BlockCost, BlockName, TopDriver

logger = logging.getLogger(__name__)


def compute_base_cost(block_costs: Dict[BlockName, BlockCost]) -> float:
    """Sum of every block except the expected risk."""
    return sum(
        cost.total
        for name, cost in block_costs.items()
        if name != BlockName.EXPECTED_RISK
    )


def compute_percentages(
    block_costs: Dict[BlockName, BlockCost], base_cost: float
) -> Dict[BlockName, float]:
    """Share of each block in the base cost.

    The expected risk is not part of the base cost, so its share is 0.
    """
    percentages: Dict[BlockName, float] = {}
    for name, cost in block_costs.items():
        if name == BlockName.EXPECTED_RISK or base_cost == 0:
            percentages[name] = 0.0
        else:
            percentages[name] = cost.total / base_cost * 100
    return percentages


def rank_top_drivers(
    block_costs: Dict[BlockName, BlockCost],
    percentages: Dict[BlockName, float],
    limit: int = TOP_DRIVER_COUNT,
) -> List[TopDriver]:
    """Largest positive blocks, ties kept in block order."""
    candidates = [
        TopDriver(
            block=name,
            label=BLOCK_LABELS.get(name.value, name.value),
            amount=cost.total,
            percentage=percentages.get(name, 0.0),
        )
        for name, cost in block_costs.items()
        if name != BlockName.EXPECTED_RISK and cost.total > 0
    ]
    # sorted() is stable, so equal amounts keep their block order
    ranked = sorted(candidates, key=lambda d: d.amount, reverse=True)
    return ranked[:limit]


def aggregate(
    block_costs: Dict[BlockName, BlockCost],
) -> Tuple[float, Dict[BlockName, float], List[TopDriver]]:
    """Return ``(base_cost, percentages, top_drivers)``."""
    base_cost = compute_base_cost(block_costs)
    percentages = compute_percentages(block_costs, base_cost)
    top_drivers = rank_top_drivers(block_costs, percentages)

    logger.debug(
        "Base cost %.2f, top drivers: %s",
        base_cost,
        [d.block.value for d in top_drivers],
    )
    return base_cost, percentages, top_drivers
