# Working time
DEFAULT_HOURS_PER_MONTH = 168

# Average gross monthly wage used when the hire's pay is left blank
DEFAULT_AVERAGE_WAGE = 2075

# Employer-side payroll taxes
DEFAULT_SOCIAL_TAX_RATE = 0.33
DEFAULT_EMPLOYER_UI_RATE = 0.008

# Bad hire risk model
DEFAULT_BAD_HIRE_RISK_RATE = 0.15  # Probability that the hire fails
DEFAULT_BAD_HIRE_PAY_MONTHS = 2  # Months paid before the hire is let go

# Gross monthly salary assumed for a participating role with no pay entered
ROLE_DEFAULT_SALARIES = {
    "hr": 2000,
    "manager": 3100,
    "team": 2500,
}

# Recommended ranges for benchmarkable fields, keyed by "<block>.<field>".
# Fields without an entry (e.g. candidate_mgmt.tests_cost) are never checked.
DEFAULT_RECOMMENDED_RANGES = {
    # Strategy & prep
    "strategy_prep.hr_hours": {"min": 2, "max": 8, "unit": "h"},
    "strategy_prep.manager_hours": {"min": 1, "max": 6, "unit": "h"},
    "strategy_prep.team_hours": {"min": 0, "max": 4, "unit": "h"},
    # Ads & branding
    "ads_branding.hr_hours": {"min": 2, "max": 8, "unit": "h"},
    "ads_branding.manager_hours": {"min": 0, "max": 4, "unit": "h"},
    "ads_branding.direct_costs": {"min": 100, "max": 2000, "unit": "€"},
    # Candidate management
    "candidate_mgmt.hr_hours": {"min": 4, "max": 25, "unit": "h"},
    "candidate_mgmt.manager_hours": {"min": 1, "max": 10, "unit": "h"},
    # Interviews
    "interviews.hr_hours": {"min": 3, "max": 15, "unit": "h"},
    "interviews.manager_hours": {"min": 3, "max": 20, "unit": "h"},
    "interviews.team_hours": {"min": 0, "max": 12, "unit": "h"},
    "interviews.direct_costs": {"min": 0, "max": 500, "unit": "€"},
    # Background check & offer
    "background_offer.hr_hours": {"min": 1, "max": 6, "unit": "h"},
    "background_offer.manager_hours": {"min": 0, "max": 4, "unit": "h"},
    # Indirect costs
    "indirect_costs.hr_hours": {"min": 2, "max": 12, "unit": "h"},
    "indirect_costs.manager_hours": {"min": 1, "max": 10, "unit": "h"},
    "indirect_costs.team_hours": {"min": 0, "max": 8, "unit": "h"},
    # Onboarding
    "onboarding.onboarding_months": {"min": 1, "max": 12, "unit": "months"},
    "onboarding.productivity_pct": {"min": 20, "max": 80, "unit": "%"},
    # Vacancy
    "vacancy.vacancy_days": {"min": 10, "max": 90, "unit": "days"},
}

# Human-readable labels for monitored fields (used in range warnings)
FIELD_LABELS = {
    "strategy_prep.hr_hours": "Strategy: HR hours",
    "strategy_prep.manager_hours": "Strategy: manager hours",
    "strategy_prep.team_hours": "Strategy: team hours",
    "ads_branding.hr_hours": "Ads: HR hours",
    "ads_branding.manager_hours": "Ads: manager hours",
    "ads_branding.team_hours": "Ads: team hours",
    "ads_branding.direct_costs": "Ad costs",
    "candidate_mgmt.hr_hours": "Candidates: HR hours",
    "candidate_mgmt.manager_hours": "Candidates: manager hours",
    "candidate_mgmt.team_hours": "Candidates: team hours",
    "candidate_mgmt.tests_cost": "Assessment costs",
    "interviews.hr_hours": "Interviews: HR hours",
    "interviews.manager_hours": "Interviews: manager hours",
    "interviews.team_hours": "Interviews: team hours",
    "interviews.direct_costs": "Interview costs",
    "background_offer.hr_hours": "Background check: HR hours",
    "background_offer.manager_hours": "Background check: manager hours",
    "background_offer.team_hours": "Background check: team hours",
    "background_offer.direct_costs": "Background check costs",
    "preboarding.devices_cost": "Devices cost",
    "preboarding.it_setup_hours": "IT setup hours",
    "preboarding.prep_hours": "HR preparation hours",
    "onboarding.onboarding_months": "Onboarding period",
    "onboarding.productivity_pct": "Average productivity",
    "onboarding.extra_costs": "Onboarding extra costs",
    "vacancy.vacancy_days": "Vacancy duration",
    "vacancy.daily_cost": "Daily vacancy cost",
    "indirect_costs.hr_hours": "Indirect: HR hours",
    "indirect_costs.manager_hours": "Indirect: manager hours",
    "indirect_costs.team_hours": "Indirect: team hours",
}

MISSING_HIRE_PAY_MESSAGE = (
    "Pay for the hire is not set. The average gross wage is used instead."
)

# Display labels for cost blocks, keyed by BlockName value
BLOCK_LABELS = {
    "strategy_prep": "Strategy and preparation",
    "ads_branding": "Job ads and employer branding",
    "candidate_mgmt": "Candidate management and tests",
    "interviews": "Interviews",
    "background_offer": "Background check and offer",
    "other_services": "Other services",
    "preboarding": "Preboarding",
    "onboarding": "Onboarding",
    "vacancy": "Vacancy cost",
    "indirect_costs": "Indirect costs",
    "expected_risk": "Expected risk cost",
}

# Number of blocks reported as top cost drivers
TOP_DRIVER_COUNT = 3
