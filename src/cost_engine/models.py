"""Data models for the hiring cost engine.

Inputs are plain mutable dataclasses owned by the caller; the engine only
reads them. Configuration is a frozen dataclass passed into every call.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from src.cost_engine.config import (
    DEFAULT_AVERAGE_WAGE,
    DEFAULT_BAD_HIRE_PAY_MONTHS,
    DEFAULT_BAD_HIRE_RISK_RATE,
    DEFAULT_EMPLOYER_UI_RATE,
    DEFAULT_HOURS_PER_MONTH,
    DEFAULT_RECOMMENDED_RANGES,
    DEFAULT_SOCIAL_TAX_RATE,
    ROLE_DEFAULT_SALARIES,
)


class PayType(str, Enum):
    UNSET = "unset"
    MONTHLY = "monthly"
    HOURLY = "hourly"


class BillingType(str, Enum):
    ONE_OFF = "one_off"
    MONTHLY = "monthly"
    HOURLY = "hourly"


class RoleType(str, Enum):
    HR = "hr"
    MANAGER = "manager"
    TEAM = "team"


class BlockName(str, Enum):
    """Hiring phases, in display order."""

    STRATEGY_PREP = "strategy_prep"
    ADS_BRANDING = "ads_branding"
    CANDIDATE_MGMT = "candidate_mgmt"
    INTERVIEWS = "interviews"
    BACKGROUND_OFFER = "background_offer"
    OTHER_SERVICES = "other_services"
    PREBOARDING = "preboarding"
    ONBOARDING = "onboarding"
    VACANCY = "vacancy"
    INDIRECT_COSTS = "indirect_costs"
    EXPECTED_RISK = "expected_risk"


# ── Pay ──────────────────────────────────────────────────────────────


@dataclass
class PayDescriptor:
    """Pay as entered by the user. Only meaningful when set and positive."""

    pay_type: PayType = PayType.UNSET
    pay_amount: float = 0.0
    hours_per_month: Optional[float] = None

    def is_default_eligible(self) -> bool:
        return self.pay_type == PayType.UNSET or self.pay_amount <= 0


@dataclass
class RoleDescriptor(PayDescriptor):
    """Pay of a role taking part in the hiring process."""

    enabled: bool = True


@dataclass
class Roles:
    hr: RoleDescriptor = field(default_factory=RoleDescriptor)
    manager: RoleDescriptor = field(default_factory=RoleDescriptor)
    team: RoleDescriptor = field(default_factory=RoleDescriptor)


@dataclass
class NormalizedPay:
    monthly_gross: float
    gross_hourly_rate: float
    employer_hourly_rate: float
    employer_monthly_cost: float
    is_default: bool

    @classmethod
    def zero(cls) -> "NormalizedPay":
        return cls(
            monthly_gross=0.0,
            gross_hourly_rate=0.0,
            employer_hourly_rate=0.0,
            employer_monthly_cost=0.0,
            is_default=True,
        )


@dataclass
class NormalizedRoles:
    hr: NormalizedPay
    manager: NormalizedPay
    team: NormalizedPay


# ── Phase inputs ─────────────────────────────────────────────────────


@dataclass
class BlockHours:
    hr_hours: float = 0.0
    manager_hours: float = 0.0
    team_hours: float = 0.0


@dataclass
class StrategyPrepInput(BlockHours):
    pass


@dataclass
class AdsBrandingInput(BlockHours):
    direct_costs: float = 0.0  # Job ads, employer branding material


@dataclass
class CandidateMgmtInput(BlockHours):
    tests_cost: float = 0.0  # Assessment tools and tests


@dataclass
class InterviewsInput(BlockHours):
    direct_costs: float = 0.0  # Travel, facilities


@dataclass
class BackgroundOfferInput(BlockHours):
    direct_costs: float = 0.0  # Background checks, legal fees


@dataclass
class PreboardingInput:
    devices_cost: float = 0.0
    it_setup_hours: float = 0.0  # Valued at the team rate
    prep_hours: float = 0.0  # Valued at the HR rate


@dataclass
class OnboardingInput:
    onboarding_months: float = 0.0
    productivity_pct: float = 0.0  # Share of full productivity during ramp-up
    extra_costs: float = 0.0  # Training material, courses


@dataclass
class VacancyInput:
    vacancy_days: float = 0.0
    daily_cost: float = 0.0  # Estimated cost of each day the seat is empty


@dataclass
class IndirectCostsInput(BlockHours):
    pass


# ── Services ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class InhouseDetails:
    """Service performed by own staff, priced at their employer hourly rate."""

    pay: PayDescriptor


@dataclass(frozen=True)
class OutsourcedDetails:
    """Service bought from a vendor."""

    billing_type: BillingType
    price: float


ServiceDetails = Union[InhouseDetails, OutsourcedDetails]


@dataclass
class ServiceEntry:
    id: str
    name: str
    details: ServiceDetails
    service_hours: float = 0.0
    repeat_on_bad_hire: bool = False


# ── Inputs & config ──────────────────────────────────────────────────


@dataclass
class CalculatorInputs:
    """Everything the user enters for a single hiring estimate."""

    position_title: str = ""
    hire_pay: PayDescriptor = field(default_factory=PayDescriptor)
    roles: Roles = field(default_factory=Roles)
    strategy_prep: StrategyPrepInput = field(default_factory=StrategyPrepInput)
    ads_branding: AdsBrandingInput = field(default_factory=AdsBrandingInput)
    candidate_mgmt: CandidateMgmtInput = field(default_factory=CandidateMgmtInput)
    interviews: InterviewsInput = field(default_factory=InterviewsInput)
    background_offer: BackgroundOfferInput = field(default_factory=BackgroundOfferInput)
    other_services: List[ServiceEntry] = field(default_factory=list)
    preboarding: PreboardingInput = field(default_factory=PreboardingInput)
    onboarding: OnboardingInput = field(default_factory=OnboardingInput)
    vacancy: VacancyInput = field(default_factory=VacancyInput)
    indirect_costs: IndirectCostsInput = field(default_factory=IndirectCostsInput)


@dataclass(frozen=True)
class RecommendedRange:
    """Advisory bounds for one input field. Either bound may be open."""

    min: Optional[float] = None
    max: Optional[float] = None
    unit: str = ""

    def range_text(self) -> str:
        if self.min is not None and self.max is not None:
            return f"{self.min}–{self.max}"
        if self.max is not None:
            return f"up to {self.max}"
        return f"at least {self.min}"


def _default_ranges() -> Dict[str, RecommendedRange]:
    return {
        path: RecommendedRange(**entry)
        for path, entry in DEFAULT_RECOMMENDED_RANGES.items()
    }


@dataclass(frozen=True)
class CostConfig:
    """Rates and assumptions used by every engine call.

    The salary and range tables are stored as read-only mappings. The config
    compares by value but is not hashable.
    """

    __hash__ = None

    hours_per_month: float = DEFAULT_HOURS_PER_MONTH
    average_wage: float = DEFAULT_AVERAGE_WAGE
    social_tax_rate: float = DEFAULT_SOCIAL_TAX_RATE
    employer_ui_rate: float = DEFAULT_EMPLOYER_UI_RATE
    bad_hire_risk_rate: float = DEFAULT_BAD_HIRE_RISK_RATE
    bad_hire_pay_months: float = DEFAULT_BAD_HIRE_PAY_MONTHS
    role_default_salaries: Mapping[str, float] = field(
        default_factory=lambda: dict(ROLE_DEFAULT_SALARIES)
    )
    recommended_ranges: Mapping[str, RecommendedRange] = field(
        default_factory=_default_ranges
    )

    def __post_init__(self):
        if not self.hours_per_month > 0:
            raise ValueError(
                f"hours_per_month must be positive, got {self.hours_per_month!r}"
            )
        object.__setattr__(
            self, "role_default_salaries", MappingProxyType(dict(self.role_default_salaries))
        )
        object.__setattr__(
            self, "recommended_ranges", MappingProxyType(dict(self.recommended_ranges))
        )

    @classmethod
    def default(cls) -> "CostConfig":
        return cls()

    def role_default_salary(self, role: RoleType) -> float:
        role_key = RoleType(role).value
        return self.role_default_salaries.get(role_key, self.average_wage)


# ── Results ──────────────────────────────────────────────────────────


@dataclass
class BlockCost:
    time_cost: float
    direct_cost: float
    total: float = field(init=False)

    def __post_init__(self):
        self.total = self.time_cost + self.direct_cost


@dataclass
class ServicesCost:
    total_services_cost: float
    repeated_services_cost: float  # Services that must be bought again on a bad hire


@dataclass
class BadHireScenario:
    bad_hire_salary_cost: float
    bad_hire_extra_if_happens: float
    expected_risk_cost: float


@dataclass
class TopDriver:
    block: BlockName
    label: str
    amount: float
    percentage: float


@dataclass
class DefaultsUsed:
    hire_pay: bool
    hr_pay: bool
    manager_pay: bool
    team_pay: bool


@dataclass
class MissingPayWarning:
    field: str
    message: str


@dataclass
class RangeWarning:
    field: str
    label: str
    message: str
    severity: str  # "info" or "warning"
    recommended_min: Optional[float]
    recommended_max: Optional[float]
    current_value: float
    unit: str


@dataclass
class ComputedResult:
    normalized_hire_pay: NormalizedPay
    normalized_roles: NormalizedRoles
    block_costs: Dict[BlockName, BlockCost]
    base_cost: float  # All blocks except expected risk
    expected_risk_cost: float
    total_cost: float  # Equal to base_cost; risk is reported separately
    total_cost_with_risk: float
    bad_hire_salary_cost: float
    bad_hire_extra_if_happens: float
    top_drivers: List[TopDriver]
    percentages: Dict[BlockName, float]
    defaults_used: DefaultsUsed
    missing_pay_warnings: List[MissingPayWarning]
    range_warnings: List[RangeWarning]
