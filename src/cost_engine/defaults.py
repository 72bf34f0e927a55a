"""Starting values for a new estimate."""

from src.cost_engine.models import (
    AdsBrandingInput,
    BackgroundOfferInput,
    BillingType,
    CalculatorInputs,
    CandidateMgmtInput,
    IndirectCostsInput,
    InterviewsInput,
    OnboardingInput,
    OutsourcedDetails,
    PayDescriptor,
    PreboardingInput,
    RoleDescriptor,
    Roles,
    ServiceEntry,
    StrategyPrepInput,
    VacancyInput,
)


def create_default_inputs() -> CalculatorInputs:
    """Typical hiring effort for a mid-level role with all pay left blank.

    Returns a fresh object on every call so callers may mutate it freely.
    """
    return CalculatorInputs(
        position_title="",
        hire_pay=PayDescriptor(),
        roles=Roles(
            hr=RoleDescriptor(enabled=True),
            manager=RoleDescriptor(enabled=True),
            team=RoleDescriptor(enabled=True),
        ),
        strategy_prep=StrategyPrepInput(hr_hours=4, manager_hours=2, team_hours=0),
        ads_branding=AdsBrandingInput(
            hr_hours=3, manager_hours=1, team_hours=0, direct_costs=500
        ),
        candidate_mgmt=CandidateMgmtInput(
            hr_hours=10, manager_hours=2, team_hours=0, tests_cost=0
        ),
        interviews=InterviewsInput(
            hr_hours=6, manager_hours=8, team_hours=4, direct_costs=0
        ),
        background_offer=BackgroundOfferInput(
            hr_hours=3, manager_hours=1, team_hours=0, direct_costs=0
        ),
        other_services=[],
        preboarding=PreboardingInput(devices_cost=500, it_setup_hours=2, prep_hours=2),
        onboarding=OnboardingInput(
            onboarding_months=3, productivity_pct=50, extra_costs=0
        ),
        vacancy=VacancyInput(vacancy_days=30, daily_cost=0),
        indirect_costs=IndirectCostsInput(hr_hours=5, manager_hours=3, team_hours=2),
    )


def create_service_entry(service_id: str, name: str = "") -> ServiceEntry:
    """A blank outsourced one-off service, ready to be filled in."""
    return ServiceEntry(
        id=service_id,
        name=name,
        details=OutsourcedDetails(billing_type=BillingType.ONE_OFF, price=0.0),
        service_hours=0.0,
        repeat_on_bad_hire=False,
    )
