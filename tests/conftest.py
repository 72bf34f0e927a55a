"""Shared fixtures for the hiring cost test suite."""

import pytest

from src.cost_engine.defaults import create_default_inputs
from src.cost_engine.models import CalculatorInputs, CostConfig


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def config():
    return CostConfig.default()


@pytest.fixture
def tax_config():
    """Config with the tax and risk figures used in the worked examples."""
    return CostConfig(
        hours_per_month=168,
        average_wage=2075,
        social_tax_rate=0.33,
        employer_ui_rate=0.008,
        bad_hire_risk_rate=0.15,
        bad_hire_pay_months=2,
    )


@pytest.fixture
def default_inputs():
    """The typical starting estimate (all pay left blank)."""
    return create_default_inputs()


@pytest.fixture
def empty_inputs():
    """Every hour and cost field zero, no services."""
    return CalculatorInputs()
