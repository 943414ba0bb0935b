"""Form controller: holds the loan inputs and recomputes on every accepted edit.

Raw edits come from widgets either as text ("$1,234.56") or as an already
parsed number (or None). Anything that does not yield a number is ignored
without touching state.
"""

import logging
import math
import re
from dataclasses import replace
from typing import Callable

from mortgage_calc.engine.amortization import compute_for
from mortgage_calc.models.loan import (
    DEFAULT_LOAN_PARAMETERS,
    LOAN_FIELDS,
    AmortizationResult,
    LoanParameters,
)

logger = logging.getLogger(__name__)

Listener = Callable[[LoanParameters, AmortizationResult], None]

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
# Leading number the way a browser parseFloat reads it once only digits, '.' and '-' remain
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_edit(raw) -> float | None:
    """Return the numeric value of a raw edit, or None if it should be ignored."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
        return None if math.isnan(value) else value

    cleaned = _NON_NUMERIC.sub("", str(raw))
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    return float(match.group())


class FormController:
    """Owns LoanParameters and the AmortizationResult derived from them."""

    def __init__(
        self,
        initial: LoanParameters = DEFAULT_LOAN_PARAMETERS,
        engine: Callable[[LoanParameters], AmortizationResult] = compute_for,
        result: AmortizationResult | None = None,
    ):
        """Start from `initial`; pass `result` to restore state without the initial compute."""
        self._engine = engine
        self._params = initial
        self._listeners: list[Listener] = []
        self._result = result if result is not None else self._engine(self._params)

    @property
    def params(self) -> LoanParameters:
        return self._params

    @property
    def result(self) -> AmortizationResult:
        return self._result

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with (params, result) after each recompute."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def edit(self, field: str, raw) -> bool:
        """Apply one field edit. Returns False when the edit was ignored."""
        if field not in LOAN_FIELDS:
            raise ValueError(f"unknown loan field: {field!r}")

        value = parse_edit(raw)
        if value is None:
            logger.debug("Ignoring non-numeric edit for %s: %r", field, raw)
            return False

        self._params = replace(self._params, **{field: value})
        self._recompute()
        return True

    def snapshot(self) -> dict[str, dict[str, float]]:
        return {"params": self._params.to_dict(), "result": self._result.to_dict()}

    def _recompute(self) -> None:
        self._result = self._engine(self._params)
        logger.debug("Recomputed %s -> %s", self._params, self._result)
        for listener in list(self._listeners):
            listener(self._params, self._result)
