"""Dash application callbacks."""
from typing import Dict, List, Optional

import plotly.graph_objects as go
from dash import Input, Output, State, html, dcc, no_update

from datadash.alerts import deliver_webhook
from datadash.data.insights import (
    battle_index,
    correlation,
    metric_value,
    risk_temperature,
    rule_triggered,
    sentiment_floor,
)
from datadash.data_manager import DataManager
from datadash.models import ArenaDashboardData, ArenaToken
from datadash.utils import format_compact, format_currency, format_signed_pct, setup_logger
from datadash.visualization import (
    create_compare_scatter,
    create_dashboard_figures,
    create_spark_line,
    leaderboard_frame,
)
from datadash.visualization.colors import SOURCE_COLORS

logger = setup_logger(__name__)


def register_callbacks(app, data_manager: DataManager) -> None:
    """
    Register all Dash callbacks with the app.

    Args:
        app: Dash application instance
        data_manager: DataManager resolving dashboard requests
    """

    @app.callback(
        Output("dashboard-data", "data"),
        Input("interval", "value"),
        Input("watchlist", "value"),
        Input("refresh", "n_intervals"),
    )
    def load_dashboard(interval, selected_ids, _n):
        """Re-run the whole pipeline on control changes and on the refresh tick."""
        data = data_manager.load(interval, selected_ids)
        return data.to_dict()

    @app.callback(
        Output("source-badge", "children"),
        Output("ticker-strip", "children"),
        Output("leaderboard", "data"),
        Output("weekly-wars", "figure"),
        Output("heat-map", "figure"),
        Output("wallet-flows", "figure"),
        Output("volume-bars", "figure"),
        Output("strategy-lab", "children"),
        Output("last-updated", "children"),
        Output("compare-a", "options"),
        Output("compare-b", "options"),
        Output("alert-token", "options"),
        Input("dashboard-data", "data"),
    )
    def render_dashboard(stored):
        if not stored:
            return (no_update,) * 12

        data = ArenaDashboardData.from_dict(stored)
        figures = create_dashboard_figures(data)
        options = [{"label": t.symbol, "value": t.id} for t in data.tokens]

        return (
            _source_badge(data.source),
            [_ticker_card(t) for t in data.tokens],
            leaderboard_frame(data.tokens).to_dict("records"),
            figures["weekly-wars"],
            figures["heat-map"],
            figures["wallet-flows"],
            figures["volume-bars"],
            _strategy_lab(data),
            f"Last updated {data.last_updated} · {data.interval} · source: {data.source}",
            options,
            options,
            options,
        )

    @app.callback(
        Output("compare-a", "value"),
        Output("compare-b", "value"),
        Output("alert-token", "value"),
        Input("compare-a", "options"),
        State("compare-a", "value"),
        State("compare-b", "value"),
        State("alert-token", "value"),
    )
    def keep_selection_valid(options, a, b, alert_token):
        """Reset selections that no longer exist in the token set."""
        ids = [o["value"] for o in options or []]
        if not ids:
            return None, None, None
        a = a if a in ids else ids[0]
        b = b if b in ids else ids[min(1, len(ids) - 1)]
        alert_token = alert_token if alert_token in ids else ids[0]
        return a, b, alert_token

    @app.callback(
        Output("compare-scatter", "figure"),
        Input("compare-a", "value"),
        Input("compare-b", "value"),
        State("dashboard-data", "data"),
    )
    def update_compare(a, b, stored):
        tokens = _tokens_by_id(stored)
        if a not in tokens or b not in tokens:
            return go.Figure()
        token_a, token_b = tokens[a], tokens[b]
        corr = correlation(token_a.price_change, token_b.price_change)
        return create_compare_scatter(token_a, token_b, corr)

    @app.callback(
        Output("alert-feed", "children"),
        Input("btn-check-alert", "n_clicks"),
        State("dashboard-data", "data"),
        State("alert-token", "value"),
        State("alert-metric", "value"),
        State("alert-operator", "value"),
        State("alert-value", "value"),
        State("alert-webhook", "value"),
        prevent_initial_call=True,
    )
    def check_alert(_clicks, stored, token_id, metric, operator, threshold, webhook_url):
        tokens = _tokens_by_id(stored)
        token = tokens.get(token_id)
        if token is None or threshold is None:
            return "Pick a token and a threshold first."

        value = metric_value(token, metric)
        if not rule_triggered(value, operator, threshold):
            return f"{token.symbol} {metric} {operator} {threshold}: not triggered (current: {_fmt_metric(metric, value)})"

        text = f"Alert: {token.symbol} {metric} {operator} {threshold} (current: {_fmt_metric(metric, value)})"
        logger.info(text)
        if not webhook_url:
            return text

        result, status = deliver_webhook(webhook_url, message=text)
        if result.get("ok"):
            return f"{text} · webhook delivered ({result.get('status')})"
        return f"{text} · webhook failed: {result.get('error') or result.get('status')} [{status}]"


def _tokens_by_id(stored: Optional[Dict]) -> Dict[str, ArenaToken]:
    if not stored:
        return {}
    return {t["id"]: ArenaToken.from_dict(t) for t in stored.get("tokens", [])}


def _fmt_metric(metric: str, value: float) -> str:
    return format_currency(value) if metric == "volume" else f"{value:.2f}"


def _source_badge(source: str) -> html.Span:
    return html.Span(
        "LIVE" if source == "live" else "FALLBACK DATA",
        style={
            "padding": "4px 10px",
            "borderRadius": "12px",
            "fontSize": "12px",
            "fontWeight": "600",
            "color": "#ffffff",
            "backgroundColor": SOURCE_COLORS.get(source, "#6c757d"),
        },
    )


def _ticker_card(token: ArenaToken) -> html.Div:
    move = token.price_change[-1] if token.price_change else 0
    return html.Div(
        style={
            "padding": "10px 14px",
            "backgroundColor": "#ffffff",
            "borderRadius": "8px",
            "boxShadow": "0 2px 4px rgba(0,0,0,0.08)",
            "minWidth": "160px",
        },
        children=[
            html.Div(f"{token.symbol} · {token.chain}", style={"fontWeight": "600", "color": "#2c3e50"}),
            html.Div(format_currency(token.current_price), style={"fontSize": "18px"}),
            html.Div(
                f"{format_signed_pct(move)} · vol {format_compact(token.volume_24h)}",
                style={"fontSize": "12px", "color": "#28a745" if move >= 0 else "#dc3545"},
            ),
            dcc.Graph(figure=create_spark_line(token), config={"displayModeBar": False}),
        ],
    )


def _strategy_lab(data: ArenaDashboardData) -> List[html.Div]:
    readouts = [
        ("Battle Index", battle_index(data.tokens)),
        ("Risk Temperature", risk_temperature(data.tokens)),
        ("Sentiment Floor", sentiment_floor(data.tokens)),
    ]
    return [
        html.Div(children=[
            html.Small(label, style={"color": "#6c757d"}),
            html.H3(str(value), style={"margin": "4px 0"}),
        ])
        for label, value in readouts
    ]
