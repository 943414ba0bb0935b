"""Recompute callback dispatch on the calculator page.

The callback is called directly with a callback context set the way Dash
sets it for a real input event.
"""

from contextvars import copy_context

import pytest
from dash._callback_context import context_value
from dash._utils import AttributeDict

import mortgage_calc.dashboard.app  # noqa: F401  registers the page with the app
from mortgage_calc.dashboard.form_state import initial_store
from mortgage_calc.dashboard.pages.calculator import recompute

# Input values in FORM_FIELDS order, as first rendered
PAGE_VALUES = ["$300,000", "$60,000", 3.5, 30, "$0", "$0"]


def _fire(triggered_input, values, store):
    def run():
        triggered = [{"prop_id": f"{triggered_input}.value"}] if triggered_input else []
        context_value.set(AttributeDict(triggered_inputs=triggered))
        return recompute(*values, store)

    return copy_context().run(run)


class TestRecompute:
    def test_currency_input(self):
        values = ["$400,000"] + PAGE_VALUES[1:]
        store, summary = _fire("loan-amount", values, initial_store())
        assert store["params"]["principal"] == 400000.0
        assert store["params"]["down_payment"] == 60000.0
        assert store["result"]["monthly_payment"] > 1077.71
        assert summary

    def test_number_input(self):
        values = PAGE_VALUES[:3] + [15] + PAGE_VALUES[4:]
        store, _ = _fire("loan-term", values, initial_store())
        assert store["params"]["term_years"] == 15.0
        assert store["params"]["principal"] == 300000.0

    def test_escrow_inputs(self):
        store = initial_store()
        store, _ = _fire("property-tax", PAGE_VALUES[:4] + ["$200", "$0"], store)
        store, _ = _fire("insurance", PAGE_VALUES[:4] + ["$200", "$100"], store)
        assert store["result"]["monthly_with_extras"] == pytest.approx(1377.71, abs=0.01)

    def test_cleared_input_ignored(self):
        values = PAGE_VALUES[:2] + [None] + PAGE_VALUES[3:]
        store = initial_store()
        new_store, _ = _fire("annual-rate", values, store)
        assert new_store == store

    def test_initial_load(self):
        store = initial_store()
        new_store, summary = _fire(None, PAGE_VALUES, store)
        assert new_store == store
        assert summary
