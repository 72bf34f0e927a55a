"""Advisory warnings for implausible inputs.

Range warnings are driven entirely by ``config.recommended_ranges``: a field
with no entry there is never evaluated. A zero value is read as "left blank"
only when another field of the same block is filled in.
"""

import logging
from dataclasses import fields
from typing import Iterator, List, Optional, Tuple

from src.cost_engine.config import FIELD_LABELS, MISSING_HIRE_PAY_MESSAGE
from src.cost_engine.models import (
    CalculatorInputs,
    CostConfig,
    MissingPayWarning,
    NormalizedPay,
    RangeWarning,
    RecommendedRange,
)

logger = logging.getLogger(__name__)

SEVERITY_INFO = "info"
SEVERITY_WARNING = "warning"

# Phase inputs whose numeric fields can be monitored, in display order
MONITORED_BLOCKS = (
    "strategy_prep",
    "ads_branding",
    "candidate_mgmt",
    "interviews",
    "background_offer",
    "preboarding",
    "onboarding",
    "vacancy",
    "indirect_costs",
)


def iter_monitored_fields(
    inputs: CalculatorInputs,
) -> Iterator[Tuple[str, float, bool]]:
    """Yield ``(field_path, value, block_in_use)`` for every phase field."""
    for block_name in MONITORED_BLOCKS:
        block = getattr(inputs, block_name)
        values = [(f.name, getattr(block, f.name)) for f in fields(block)]
        in_use = any(value != 0 for _, value in values)
        for field_name, value in values:
            yield f"{block_name}.{field_name}", value, in_use


def check_field_range(
    field_path: str,
    value: float,
    recommended: Optional[RecommendedRange],
    block_in_use: bool,
) -> Optional[RangeWarning]:
    """Compare one value against its recommended range."""
    if recommended is None or (recommended.min is None and recommended.max is None):
        return None

    range_text = f"{recommended.range_text()} {recommended.unit}".rstrip()

    def _warning(message: str, severity: str) -> RangeWarning:
        return RangeWarning(
            field=field_path,
            label=FIELD_LABELS.get(field_path, field_path),
            message=message,
            severity=severity,
            recommended_min=recommended.min,
            recommended_max=recommended.max,
            current_value=value,
            unit=recommended.unit,
        )

    if value == 0:
        if block_in_use:
            return _warning(
                f"Typical range: {range_text}. Enter an estimate.", SEVERITY_INFO
            )
        return None

    if recommended.min is not None and value < recommended.min:
        return _warning(
            f"This may be underestimated. Typical range: {range_text}.",
            SEVERITY_INFO,
        )

    if recommended.max is not None and value > recommended.max:
        return _warning(
            "This is higher than typical. Consider whether it can be "
            f"optimized to reduce costs. Typical range: {range_text}.",
            SEVERITY_WARNING,
        )

    return None


def compute_range_warnings(
    inputs: CalculatorInputs, config: CostConfig
) -> List[RangeWarning]:
    warnings: List[RangeWarning] = []
    for field_path, value, in_use in iter_monitored_fields(inputs):
        warning = check_field_range(
            field_path, value, config.recommended_ranges.get(field_path), in_use
        )
        if warning is not None:
            warnings.append(warning)

    if warnings:
        logger.debug(
            "Range warnings for: %s", ", ".join(w.field for w in warnings)
        )
    return warnings


def compute_missing_pay_warnings(
    hire_pay: NormalizedPay,
) -> List[MissingPayWarning]:
    """Flag a hire pay that was replaced by the average wage."""
    if hire_pay.is_default:
        return [MissingPayWarning(field="hire_pay", message=MISSING_HIRE_PAY_MESSAGE)]
    return []
