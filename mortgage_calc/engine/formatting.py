"""Display formatting for money amounts (en-US, whole dollars)."""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

WHOLE_DOLLARS = Decimal("1")

# Enough digits to quantize any finite float without InvalidOperation
_FLOAT_DIGITS = 400


def format_currency(amount: float) -> str:
    """Format as whole US dollars, e.g. 1077.71 -> "$1,078", -1500 -> "-$1,500".

    Amounts that round to zero print as "$0" (never "-$0"), and NaN or
    infinity also print as "$0" rather than "$NaN". Both are deliberate: the
    engine never hands out non-finite figures, so these only guard the display.
    """
    if not math.isfinite(amount):
        return "$0"
    with localcontext() as ctx:
        ctx.prec = _FLOAT_DIGITS
        # Decimal(float) is exact, so ties round on the value actually stored
        dollars = int(Decimal(amount).quantize(WHOLE_DOLLARS, ROUND_HALF_UP))
    if dollars < 0:
        return f"-${-dollars:,}"
    return f"${dollars:,}"
