"""Glue between the calculator page's session store and FormController.

Dash callbacks are stateless, so each input event restores a controller from
the stored snapshot, applies the single edit, and hands back the new snapshot.
"""

from mortgage_calc.engine.form import FormController
from mortgage_calc.models.loan import AmortizationResult, LoanParameters

# Loan field -> component id on the calculator page
FIELD_INPUT_IDS = {
    "principal": "loan-amount",
    "down_payment": "down-payment",
    "annual_rate_pct": "annual-rate",
    "term_years": "loan-term",
    "monthly_property_tax": "property-tax",
    "monthly_insurance": "insurance",
}

INPUT_FIELDS = {input_id: field for field, input_id in FIELD_INPUT_IDS.items()}


def restore_controller(store: dict | None) -> FormController:
    """Controller for a stored snapshot. Recomputes only if no result was stored."""
    store = store or {}
    params = LoanParameters.from_dict(store.get("params"))
    stored_result = store.get("result")
    result = AmortizationResult(**stored_result) if stored_result else None
    return FormController(params, result=result)


def initial_store() -> dict:
    return restore_controller(None).snapshot()


def apply_form_edit(store: dict | None, field: str | None = None, value=None) -> dict:
    """Apply one edit to the stored state and return the fresh snapshot.

    With no field (initial page load) the stored snapshot is returned as is.
    """
    controller = restore_controller(store)
    if field is not None:
        controller.edit(field, value)
    return controller.snapshot()
