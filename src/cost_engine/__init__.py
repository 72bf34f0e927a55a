from src.cost_engine.calculator import compute_totals
from src.cost_engine.config_codec import (
    ConfigError,
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)
from src.cost_engine.defaults import create_default_inputs, create_service_entry
from src.cost_engine.models import (
    BillingType,
    BlockCost,
    BlockName,
    CalculatorInputs,
    ComputedResult,
    CostConfig,
    InhouseDetails,
    NormalizedPay,
    OutsourcedDetails,
    PayDescriptor,
    PayType,
    RecommendedRange,
    RoleDescriptor,
    RoleType,
    ServiceEntry,
)

__all__ = [
    "BillingType",
    "BlockCost",
    "BlockName",
    "CalculatorInputs",
    "ComputedResult",
    "ConfigError",
    "CostConfig",
    "InhouseDetails",
    "NormalizedPay",
    "OutsourcedDetails",
    "PayDescriptor",
    "PayType",
    "RecommendedRange",
    "RoleDescriptor",
    "RoleType",
    "ServiceEntry",
    "compute_totals",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
    "create_default_inputs",
    "create_service_entry",
]
