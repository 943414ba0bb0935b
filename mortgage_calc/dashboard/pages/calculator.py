"""Calculator page — loan inputs on the left, live payment summary on the right.

Every input change fires one callback that applies the edit through
FormController and re-renders the summary from the fresh snapshot.
"""

import dash
from dash import html, dcc, callback, Input, Output, State
import plotly.graph_objects as go

from mortgage_calc.config import settings
from mortgage_calc.dashboard.form_state import (
    FIELD_INPUT_IDS,
    INPUT_FIELDS,
    apply_form_edit,
    initial_store,
)
from mortgage_calc.engine.formatting import format_currency
from mortgage_calc.models.loan import DEFAULT_LOAN_PARAMETERS

dash.register_page(__name__, path="/", name="Calculator")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PANEL_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "padding": "1.5rem",
    "marginBottom": "1.5rem",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

ROW_STYLE = {
    "display": "flex",
    "justifyContent": "space-between",
    "padding": "0.5rem 0",
    "borderBottom": "1px solid #eee",
}

PRINCIPAL_COLOR = "#1a1a2e"
INTEREST_COLOR = "#e94560"

# Field order on the page; also the callback's Input order
FORM_FIELDS = list(FIELD_INPUT_IDS)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"marginBottom": "1rem"})


def _currency_input(field):
    # Free text so "$" and "," survive typing; the controller strips them
    return dcc.Input(
        id=FIELD_INPUT_IDS[field],
        type="text",
        inputMode="numeric",
        value=format_currency(getattr(DEFAULT_LOAN_PARAMETERS, field)),
        style=FIELD_STYLE,
    )


layout = html.Div([
    dcc.Store(id="loan-store", storage_type="memory", data=initial_store()),

    html.Div([
        html.H2("Mortgage Calculator", style={"marginBottom": "0.25rem"}),
        html.P("Calculate your monthly mortgage payments and view loan details",
               style={"color": "#666"}),
    ], style={"textAlign": "center", "marginBottom": "2rem"}),

    html.Div([
        # --- Inputs ---
        html.Div([
            html.Div([
                html.H3("Loan Details"),
                _field("Loan Amount", _currency_input("principal")),
                _field("Down Payment", _currency_input("down_payment")),
                _field("Annual Interest Rate (%)", dcc.Input(
                    id=FIELD_INPUT_IDS["annual_rate_pct"],
                    type="number",
                    value=DEFAULT_LOAN_PARAMETERS.annual_rate_pct,
                    step=0.1, min=0, max=settings.max_rate_pct,
                    style=FIELD_STYLE,
                )),
                _field("Loan Term (Years)", dcc.Input(
                    id=FIELD_INPUT_IDS["term_years"],
                    type="number",
                    value=DEFAULT_LOAN_PARAMETERS.term_years,
                    step=1, min=1, max=settings.max_term_years,
                    style=FIELD_STYLE,
                )),
            ], style=PANEL_STYLE),
            html.Div([
                html.H3("Additional Costs (Monthly)"),
                _field("Property Tax", _currency_input("monthly_property_tax")),
                _field("Insurance", _currency_input("monthly_insurance")),
            ], style=PANEL_STYLE),
        ], style={"flex": "1"}),

        # --- Results ---
        html.Div(id="calculator-summary", style={"flex": "1"}),
    ], style={"display": "flex", "gap": "2rem", "flexWrap": "wrap"}),
])


# ---------------------------------------------------------------------------
# Recompute callback
# ---------------------------------------------------------------------------


@callback(
    [Output("loan-store", "data"), Output("calculator-summary", "children")],
    [Input(FIELD_INPUT_IDS[field], "value") for field in FORM_FIELDS],
    State("loan-store", "data"),
)
def recompute(*args):
    *values, store = args
    field = INPUT_FIELDS.get(dash.ctx.triggered_id)
    value = values[FORM_FIELDS.index(field)] if field else None

    snapshot = apply_form_edit(store, field, value)
    return snapshot, _build_summary(snapshot)


# ---------------------------------------------------------------------------
# Summary rendering
# ---------------------------------------------------------------------------


def _build_summary(snapshot):
    params = snapshot["params"]
    result = snapshot["result"]
    financed = params["principal"] - params["down_payment"]

    children = [
        html.Div([
            html.H3("Payment Summary"),
            html.Div([
                html.Div("Monthly Payment (P&I)", style={"fontSize": "0.85rem", "color": "#666"}),
                html.Div(format_currency(result["monthly_payment"]), style={
                    "fontSize": "2.5rem", "fontWeight": "bold", "color": PRINCIPAL_COLOR,
                }),
            ], style={"textAlign": "center", "padding": "1rem", "backgroundColor": "#f5f5f5",
                      "borderRadius": "8px", "marginBottom": "1rem"}),
            html.Div([
                _metric_card("Total Monthly Payment", format_currency(result["monthly_with_extras"])),
                _metric_card("Down Payment", format_currency(params["down_payment"])),
            ], style={"display": "flex", "gap": "1rem"}),
        ], style=PANEL_STYLE),
        html.Div([
            html.H3("Loan Summary"),
            _summary_row("Principal Loan Amount", format_currency(financed)),
            _summary_row("Total Interest Paid", format_currency(result["total_interest"])),
            _summary_row("Total Cost of Loan", format_currency(result["total_payment"])),
        ], style=PANEL_STYLE),
    ]

    if financed > 0 and result["total_interest"] > 0:
        children.append(html.Div(
            dcc.Graph(figure=_build_cost_breakdown(financed, result["total_interest"])),
            style=PANEL_STYLE,
        ))

    return children


def _metric_card(label, value):
    return html.Div([
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold"}),
    ], style={
        "flex": "1",
        "backgroundColor": "#f5f5f5",
        "borderRadius": "8px",
        "padding": "1rem",
        "textAlign": "center",
    })


def _summary_row(label, value):
    return html.Div([
        html.Span(label, style={"color": "#666"}),
        html.Span(value, style={"fontWeight": "500"}),
    ], style=ROW_STYLE)


def _build_cost_breakdown(financed, total_interest):
    fig = go.Figure(go.Pie(
        labels=["Principal", "Interest"],
        values=[financed, total_interest],
        hole=0.55,
        marker={"colors": [PRINCIPAL_COLOR, INTEREST_COLOR]},
        textinfo="percent",
        hovertemplate="%{label}: $%{value:,.0f}<extra></extra>",
    ))
    fig.update_layout(
        title="Total Cost Breakdown",
        margin={"t": 50, "b": 20, "l": 20, "r": 20},
        height=320,
    )
    return fig
