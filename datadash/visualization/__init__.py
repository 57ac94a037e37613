"""Visualization modules for charts and colors."""
from datadash.visualization.chart_builder import (
    create_compare_scatter,
    create_dashboard_figures,
    create_heat_map,
    create_spark_line,
    create_volume_bars,
    create_wallet_flow_donut,
    create_weekly_wars_chart,
    leaderboard_frame,
)
from datadash.visualization.colors import color_for

__all__ = [
    "color_for",
    "create_compare_scatter",
    "create_dashboard_figures",
    "create_heat_map",
    "create_spark_line",
    "create_volume_bars",
    "create_wallet_flow_donut",
    "create_weekly_wars_chart",
    "leaderboard_frame",
]
