"""Chart building utilities for visualization."""
from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from datadash.data.synthesizer import signal_score
from datadash.models import ArenaDashboardData, ArenaToken, HeatMap, WalletFlow, WeeklyPoint
from datadash.visualization.colors import color_for, heat_colorscale

_MARGIN = dict(t=40, r=30, l=60, b=50)


def leaderboard_frame(tokens: Sequence[ArenaToken]) -> pd.DataFrame:
    """
    Flatten ranked tokens into the leaderboard table.

    Args:
        tokens: Tokens in ranked order

    Returns:
        DataFrame with one row per token, rank starting at 1
    """
    rows = [
        {
            "rank": rank,
            "symbol": t.symbol,
            "name": t.name,
            "chain": t.chain,
            "price": t.current_price,
            "market_cap": t.market_cap,
            "volume_24h": t.volume_24h,
            "move_pct": t.price_change[-1] if t.price_change else 0.0,
            "sentiment": t.sentiment,
            "whales": t.whales,
            "holders": t.holders,
            "score": signal_score(t.signal),
        }
        for rank, t in enumerate(tokens, start=1)
    ]
    return pd.DataFrame(rows, columns=[
        "rank", "symbol", "name", "chain", "price", "market_cap", "volume_24h",
        "move_pct", "sentiment", "whales", "holders", "score",
    ])


def create_weekly_wars_chart(
    points: Sequence[WeeklyPoint], tokens: Sequence[ArenaToken]
) -> go.Figure:
    """
    Create the three-line comparative chart for the top-3 tokens.

    Lines are named after the tokens occupying each slot; empty slots keep
    their series name.
    """
    days = [p.day for p in points]
    fig = go.Figure()

    for slot, series in enumerate(("alpha", "beta", "gamma")):
        name = tokens[slot].symbol if slot < len(tokens) else series
        fig.add_trace(
            go.Scatter(
                x=days,
                y=[getattr(p, series) for p in points],
                mode="lines+markers",
                name=name,
                line=dict(color=color_for(name), width=2),
                hovertemplate=f"<b>{name}</b>: %{{y}}<extra></extra>",
            )
        )

    fig.update_layout(
        title="Social Wars",
        yaxis_title="Engagement index",
        margin=_MARGIN,
        legend=dict(orientation="h", y=-0.2),
    )
    return fig


def create_heat_map(heat_map: HeatMap) -> go.Figure:
    fig = go.Figure(
        go.Heatmap(
            z=[list(row) for row in heat_map.matrix],
            x=list(heat_map.cols),
            y=list(heat_map.rows),
            colorscale=heat_colorscale(),
            zmin=32,
            zmax=99,
            text=[list(row) for row in heat_map.matrix],
            texttemplate="%{text}",
            hovertemplate="%{y} / %{x}: %{z}<extra></extra>",
        )
    )
    fig.update_layout(title="Regional Heat", margin=_MARGIN)
    return fig


def create_wallet_flow_donut(flows: Sequence[WalletFlow]) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=[f.label for f in flows],
            values=[f.value for f in flows],
            hole=0.55,
            sort=False,
            marker=dict(colors=["#0b3d91", "#28a745", "#fd7e14", "#dc3545"]),
        )
    )
    fig.update_layout(title="Wallet Flows", margin=_MARGIN)
    return fig


def create_volume_bars(tokens: Sequence[ArenaToken]) -> go.Figure:
    fig = go.Figure(
        go.Bar(
            x=[t.symbol for t in tokens],
            y=[t.volume_24h for t in tokens],
            marker=dict(color=[color_for(t.symbol) for t in tokens]),
            hovertemplate="<b>%{x}</b>: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(title="24h Volume", yaxis=dict(tickformat="$.2s"), margin=_MARGIN)
    return fig


def create_spark_line(token: ArenaToken) -> go.Figure:
    """Tiny percent-change line for a ticker card."""
    color = "#28a745" if (token.price_change[-1] if token.price_change else 0) >= 0 else "#dc3545"
    fig = go.Figure(
        go.Scatter(
            y=list(token.price_change),
            mode="lines",
            line=dict(color=color, width=2),
            fill="tozeroy",
            hovertemplate="%{y:+.2f}%<extra></extra>",
        )
    )
    fig.update_layout(
        margin=dict(t=0, r=0, l=0, b=0),
        height=60,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        showlegend=False,
    )
    return fig


def create_compare_scatter(token_a: ArenaToken, token_b: ArenaToken, corr: float) -> go.Figure:
    """
    Create a scatter of two tokens' percent-change series with correlation in title.

    Args:
        token_a: Token on the x axis
        token_b: Token on the y axis
        corr: Correlation of the two series

    Returns:
        Plotly Figure with scatter plot
    """
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=list(token_a.price_change),
            y=list(token_b.price_change),
            mode="markers",
            name=f"{token_a.symbol} vs {token_b.symbol}",
            marker=dict(size=8, opacity=0.7, color=color_for(token_a.symbol)),
            hovertemplate=(
                f"<b>{token_a.symbol} move</b>: %{{x:+.2f}}%<br>"
                f"<b>{token_b.symbol} move</b>: %{{y:+.2f}}%<extra></extra>"
            ),
        )
    )
    fig.update_layout(
        title=f"Move scatter — {token_a.symbol} vs {token_b.symbol} | corr={corr*100:.1f}%",
        xaxis_title=f"{token_a.symbol} change (%)",
        yaxis_title=f"{token_b.symbol} change (%)",
        margin=_MARGIN,
    )
    return fig


def create_dashboard_figures(data: ArenaDashboardData) -> dict:
    """All payload-level figures keyed by graph id."""
    return {
        "weekly-wars": create_weekly_wars_chart(data.weekly_wars, data.tokens),
        "heat-map": create_heat_map(data.heat_map),
        "wallet-flows": create_wallet_flow_donut(data.wallet_flows),
        "volume-bars": create_volume_bars(data.tokens),
    }
