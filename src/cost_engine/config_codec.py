"""Convert :class:`CostConfig` to and from a flat JSON-serializable dict.

Stored configs are merged over the defaults: missing keys keep their default
value and unknown keys are ignored, so configs saved by an older version
still load.
"""

import json
import logging
from typing import Dict, Optional

from src.cost_engine.models import CostConfig, RecommendedRange

logger = logging.getLogger(__name__)

SCALAR_KEYS = (
    "hours_per_month",
    "average_wage",
    "social_tax_rate",
    "employer_ui_rate",
    "bad_hire_risk_rate",
    "bad_hire_pay_months",
)


class ConfigError(ValueError):
    """Raised when a stored config cannot be turned into a CostConfig."""

    pass


def config_to_dict(config: CostConfig) -> Dict:
    """Convert CostConfig to JSON-serializable dict."""
    data = {key: getattr(config, key) for key in SCALAR_KEYS}
    data["role_default_salaries"] = dict(config.role_default_salaries)
    data["recommended_ranges"] = {
        path: {"min": rng.min, "max": rng.max, "unit": rng.unit}
        for path, rng in config.recommended_ranges.items()
    }
    return data


def _number(key: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    return value


def _scalar(key: str, value) -> float:
    number = _number(key, value)
    if key == "hours_per_month" and not number > 0:
        raise ConfigError(f"hours_per_month must be positive, got {number!r}")
    if number < 0:
        raise ConfigError(f"{key} must not be negative, got {number!r}")
    return number


def _optional_number(key: str, value) -> Optional[float]:
    if value is None:
        return None
    return _number(key, value)


def _range_from_dict(path: str, entry) -> RecommendedRange:
    if not isinstance(entry, dict):
        raise ConfigError(f"Range for {path} must be an object, got {entry!r}")

    low = _optional_number(f"{path}.min", entry.get("min"))
    high = _optional_number(f"{path}.max", entry.get("max"))
    if low is not None and high is not None and low > high:
        raise ConfigError(f"Range for {path} has min {low} greater than max {high}")

    return RecommendedRange(min=low, max=high, unit=str(entry.get("unit", "")))


def config_from_dict(data: Dict) -> CostConfig:
    """Reconstruct CostConfig from dict, filling gaps from the defaults."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be an object, got {type(data).__name__}")

    defaults = CostConfig.default()
    known = set(SCALAR_KEYS) | {"role_default_salaries", "recommended_ranges"}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    scalars = {
        key: _scalar(key, data[key]) if key in data else getattr(defaults, key)
        for key in SCALAR_KEYS
    }

    salaries = dict(defaults.role_default_salaries)
    for role, salary in (data.get("role_default_salaries") or {}).items():
        salaries[role] = _number(f"role_default_salaries.{role}", salary)

    if "recommended_ranges" in data:
        ranges = {
            path: _range_from_dict(path, entry)
            for path, entry in (data["recommended_ranges"] or {}).items()
        }
    else:
        ranges = dict(defaults.recommended_ranges)

    return CostConfig(
        role_default_salaries=salaries,
        recommended_ranges=ranges,
        **scalars,
    )


def config_to_json(config: CostConfig) -> str:
    return json.dumps(config_to_dict(config), indent=2, ensure_ascii=False)


def config_from_json(text: str) -> CostConfig:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config is not valid JSON: {e}") from e
    return config_from_dict(data)
