"""Tabular views of a computed estimate for print and export.

Values are left unrounded; formatting belongs to whoever renders the table.
"""

import logging
from typing import Dict

import pandas as pd

from src.cost_engine.config import BLOCK_LABELS
from src.cost_engine.models import BlockName, ComputedResult

logger = logging.getLogger(__name__)

BREAKDOWN_COLUMNS = [
    "block",
    "label",
    "time_cost",
    "direct_cost",
    "total",
    "percentage",
]


def breakdown_frame(result: ComputedResult, include_risk: bool = True) -> pd.DataFrame:
    """One row per block, in block order.

    The expected risk row is kept by default so the table shows it next to
    the certain costs; its percentage is always 0.
    """
    rows: list[dict] = []
    for name, cost in result.block_costs.items():
        if name == BlockName.EXPECTED_RISK and not include_risk:
            continue
        rows.append({
            "block": name.value,
            "label": BLOCK_LABELS.get(name.value, name.value),
            "time_cost": cost.time_cost,
            "direct_cost": cost.direct_cost,
            "total": cost.total,
            "percentage": result.percentages.get(name, 0.0),
        })

    df = pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
    logger.debug("Built breakdown frame with %d rows", len(df))
    return df


def summary_metrics(result: ComputedResult) -> Dict[str, float]:
    """Headline figures relating the hiring cost to the hire's salary."""
    monthly_gross = result.normalized_hire_pay.monthly_gross
    if monthly_gross > 0:
        percent_of_annual = result.total_cost / (monthly_gross * 12) * 100
        months_equivalent = result.total_cost / monthly_gross
    else:
        percent_of_annual = 0.0
        months_equivalent = 0.0

    return {
        "base_cost": result.base_cost,
        "expected_risk_cost": result.expected_risk_cost,
        "total_cost": result.total_cost,
        "total_cost_with_risk": result.total_cost_with_risk,
        "hire_employer_monthly_cost": result.normalized_hire_pay.employer_monthly_cost,
        "cost_as_percent_of_annual_salary": percent_of_annual,
        "months_of_salary_equivalent": months_equivalent,
    }
