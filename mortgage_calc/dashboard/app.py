"""Plotly Dash application — multi-page layout."""

import sys
from pathlib import Path

# Ensure project root is on sys.path so `mortgage_calc.*` imports work when
# this file is run as a script from a source checkout (no `pip install -e`),
# including in the child process Dash's reloader spawns with debug on.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dash import Dash, html, dcc, page_container

from mortgage_calc.config import settings
from mortgage_calc.logging_setup import configure_logging

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title=settings.app_title,
)

app.layout = html.Div([
    # Navigation
    html.Nav([
        html.Div([
            html.H1(settings.app_title, style={"fontSize": "1.5rem", "margin": "0"}),
            html.Div([
                dcc.Link("Calculator", href="/", style={"marginRight": "1rem", "color": "white"}),
            ]),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1000px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1000px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


def main() -> None:
    configure_logging()
    app.run(debug=settings.debug, host=settings.dashboard_host, port=settings.dashboard_port)


if __name__ == "__main__":
    main()
