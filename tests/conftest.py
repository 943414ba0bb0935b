"""Shared fixtures.

Fixture loan: $300K price, $60K down ($240K financed), 3.5% rate, 30yr fixed.
"""

import pytest

from mortgage_calc.engine.amortization import compute_for
from mortgage_calc.engine.form import FormController
from mortgage_calc.models.loan import DEFAULT_LOAN_PARAMETERS, LoanParameters


@pytest.fixture
def default_params() -> LoanParameters:
    return DEFAULT_LOAN_PARAMETERS


@pytest.fixture
def escrow_params() -> LoanParameters:
    """Default loan with $200/mo property tax and $100/mo insurance."""
    return LoanParameters(
        principal=300000.0,
        annual_rate_pct=3.5,
        term_years=30,
        down_payment=60000.0,
        monthly_property_tax=200.0,
        monthly_insurance=100.0,
    )


class CountingEngine:
    """Wraps the real engine and records every call."""

    def __init__(self):
        self.calls: list[LoanParameters] = []

    def __call__(self, params):
        self.calls.append(params)
        return compute_for(params)


@pytest.fixture
def counting_engine() -> CountingEngine:
    return CountingEngine()


@pytest.fixture
def controller(counting_engine) -> FormController:
    return FormController(engine=counting_engine)
