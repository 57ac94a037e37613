"""Dash application layout."""
from typing import Sequence

from dash import dash_table, dcc, html

from datadash.config import AUTO_REFRESH_SECONDS
from datadash.constants import ALERT_METRICS, ALERT_OPERATORS, DEFAULT_INTERVAL, INTERVALS
from datadash.models import WatchCoin

PANEL_STYLE = {
    "padding": "16px",
    "backgroundColor": "#ffffff",
    "borderRadius": "8px",
    "boxShadow": "0 2px 4px rgba(0,0,0,0.08)",
    "marginBottom": "16px",
}

LABEL_STYLE = {
    "fontWeight": "600",
    "fontSize": "13px",
    "color": "#6c757d",
    "textTransform": "uppercase",
    "letterSpacing": "0.5px",
    "marginBottom": "4px",
}

LEADERBOARD_COLUMNS = [
    {"name": "#", "id": "rank"},
    {"name": "Token", "id": "symbol"},
    {"name": "Chain", "id": "chain"},
    {"name": "Price", "id": "price", "type": "numeric"},
    {"name": "Market Cap", "id": "market_cap", "type": "numeric", "format": {"specifier": "$.3s"}},
    {"name": "Volume 24h", "id": "volume_24h", "type": "numeric", "format": {"specifier": "$.3s"}},
    {"name": "Move %", "id": "move_pct", "type": "numeric", "format": {"specifier": "+.2f"}},
    {"name": "Sentiment", "id": "sentiment", "type": "numeric"},
    {"name": "Whales", "id": "whales", "type": "numeric"},
    {"name": "Holders", "id": "holders", "type": "numeric", "format": {"specifier": ",d"}},
    {"name": "Score", "id": "score", "type": "numeric"},
]


def create_layout(coins: Sequence[WatchCoin]) -> html.Div:
    """
    Create the Dash application layout.

    Args:
        coins: Watch coins offered in the token selector

    Returns:
        HTML Div containing the full layout
    """
    return html.Div(
        style={
            "fontFamily": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif",
            "padding": "20px",
            "maxWidth": "100%",
            "backgroundColor": "#f8f9fa"
        },
        children=[
            html.Div(
                style={"display": "flex", "alignItems": "center", "gap": "16px"},
                children=[
                    html.H2("Data Dash", style={"marginBottom": "10px", "color": "#2c3e50", "fontWeight": "600"}),
                    html.Div(id="source-badge"),
                ],
            ),

            dcc.Store(id="dashboard-data"),
            dcc.Interval(id="refresh", interval=AUTO_REFRESH_SECONDS * 1000, n_intervals=0),

            _create_controls_div(coins),

            html.Div(id="ticker-strip", style={"display": "flex", "gap": "12px", "flexWrap": "wrap", "marginBottom": "16px"}),

            html.Div(
                style=PANEL_STYLE,
                children=[
                    html.Div("Leaderboard", style=LABEL_STYLE),
                    dash_table.DataTable(
                        id="leaderboard",
                        columns=LEADERBOARD_COLUMNS,
                        data=[],
                        sort_action="native",
                        style_cell={"fontSize": "13px", "padding": "6px 10px"},
                        style_header={"fontWeight": "600", "backgroundColor": "#f1f3f5"},
                    ),
                ],
            ),

            html.Div(
                style={"display": "grid", "gridTemplateColumns": "repeat(auto-fit, minmax(420px, 1fr))", "gap": "16px"},
                children=[
                    html.Div(style=PANEL_STYLE, children=[dcc.Graph(id="weekly-wars")]),
                    html.Div(style=PANEL_STYLE, children=[dcc.Graph(id="heat-map")]),
                    html.Div(style=PANEL_STYLE, children=[dcc.Graph(id="wallet-flows")]),
                    html.Div(style=PANEL_STYLE, children=[dcc.Graph(id="volume-bars")]),
                ],
            ),

            html.Div(style=PANEL_STYLE, children=[
                html.Div("Alpha Strategy Lab", style=LABEL_STYLE),
                html.Div(id="strategy-lab", style={"display": "flex", "gap": "24px"}),
            ]),

            _create_compare_div(),
            _create_alert_div(),

            html.Div(
                id="last-updated",
                style={"marginTop": "12px", "color": "#6c757d", "fontSize": "13px", "fontStyle": "italic"},
            ),
        ]
    )


def _create_controls_div(coins: Sequence[WatchCoin]) -> html.Div:
    """Create the controls section: interval and token selection."""
    return html.Div(
        style={**PANEL_STYLE, "display": "flex", "gap": "24px", "flexWrap": "wrap"},
        children=[
            html.Div(
                style={"display": "flex", "flexDirection": "column", "gap": "8px"},
                children=[
                    html.Div("Interval", style=LABEL_STYLE),
                    dcc.RadioItems(
                        id="interval",
                        options=[{"label": i, "value": i} for i in INTERVALS],
                        value=DEFAULT_INTERVAL,
                        inline=True,
                        inputStyle={"marginRight": "4px", "marginLeft": "10px"},
                    ),
                ],
            ),
            html.Div(
                style={"display": "flex", "flexDirection": "column", "gap": "8px", "minWidth": "360px"},
                children=[
                    html.Div("Watchlist", style=LABEL_STYLE),
                    dcc.Dropdown(
                        id="watchlist",
                        options=[{"label": f"{c.symbol} · {c.name}", "value": c.id} for c in coins],
                        value=[c.id for c in coins],
                        multi=True,
                    ),
                ],
            ),
        ],
    )


def _create_compare_div() -> html.Div:
    return html.Div(
        style=PANEL_STYLE,
        children=[
            html.Div("Compare", style=LABEL_STYLE),
            html.Div(
                style={"display": "flex", "gap": "12px"},
                children=[
                    dcc.Dropdown(id="compare-a", style={"minWidth": "160px"}),
                    dcc.Dropdown(id="compare-b", style={"minWidth": "160px"}),
                ],
            ),
            dcc.Graph(id="compare-scatter", style={"height": "40vh", "marginTop": "10px"}),
        ],
    )


def _create_alert_div() -> html.Div:
    return html.Div(
        style=PANEL_STYLE,
        children=[
            html.Div("Alert Rule", style=LABEL_STYLE),
            html.Div(
                style={"display": "flex", "gap": "8px", "flexWrap": "wrap"},
                children=[
                    dcc.Dropdown(id="alert-token", style={"minWidth": "140px"}),
                    dcc.Dropdown(
                        id="alert-metric",
                        options=[{"label": m, "value": m} for m in ALERT_METRICS],
                        value="move",
                        clearable=False,
                        style={"minWidth": "140px"},
                    ),
                    dcc.Dropdown(
                        id="alert-operator",
                        options=[{"label": o, "value": o} for o in ALERT_OPERATORS],
                        value=">",
                        clearable=False,
                        style={"minWidth": "80px"},
                    ),
                    dcc.Input(id="alert-value", type="number", value=5, placeholder="threshold"),
                    dcc.Input(id="alert-webhook", type="url", placeholder="https://webhook.url (optional)",
                              style={"minWidth": "280px"}),
                    html.Button("Check Alert", id="btn-check-alert"),
                ],
            ),
            html.Div(id="alert-feed", style={"marginTop": "8px", "fontSize": "13px", "color": "#495057"}),
        ],
    )
