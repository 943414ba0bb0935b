"""Fixed-rate mortgage payment computation.

Pure functions: floats in, dataclass out. No I/O.

Degenerate inputs (zero rate, zero term, float overflow) are never raised.
They surface as NaN/infinity inside the computation and every output field
is then coerced to 0 on its own.
"""

import math

from mortgage_calc.models.loan import AmortizationResult, LoanParameters

NAN = float("nan")


def finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _pi_payment(financed: float, monthly_rate: float, n_payments: float) -> float:
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    try:
        factor = (1 + monthly_rate) ** n_payments
        if isinstance(factor, complex):
            # Negative base with a fractional exponent
            return NAN
        return financed * (monthly_rate * factor) / (factor - 1)
    except (ZeroDivisionError, OverflowError):
        # Zero rate or zero term makes the denominator 0
        return NAN


def compute_payment(
    principal: float,
    annual_rate_pct: float,
    term_years: float,
    down_payment: float,
    monthly_property_tax: float = 0,
    monthly_insurance: float = 0,
) -> AmortizationResult:
    """Monthly P&I, lifetime totals and the monthly figure with escrow extras.

    Args:
        principal: Property price
        annual_rate_pct: Nominal annual rate as a percentage (e.g. 3.5)
        term_years: Loan term in years
        down_payment: Cash paid up front, subtracted from principal
        monthly_property_tax: Flat monthly add-on, not amortized
        monthly_insurance: Flat monthly add-on, not amortized
    """
    financed = principal - down_payment
    r = annual_rate_pct / 100 / 12
    n = term_years * 12

    payment = _pi_payment(financed, r, n)
    total_payment = payment * n
    total_interest = total_payment - financed
    with_extras = payment + monthly_property_tax + monthly_insurance

    return AmortizationResult(
        monthly_payment=finite_or_zero(payment),
        total_payment=finite_or_zero(total_payment),
        total_interest=finite_or_zero(total_interest),
        monthly_with_extras=finite_or_zero(with_extras),
    )


def compute_for(params: LoanParameters) -> AmortizationResult:
    return compute_payment(
        params.principal,
        params.annual_rate_pct,
        params.term_years,
        params.down_payment,
        params.monthly_property_tax,
        params.monthly_insurance,
    )
