"""Color utilities for chart visualization."""
from plotly.colors import qualitative


# Stable color palette for consistent token colors
PALETTE = (
    qualitative.Dark24
    + qualitative.Light24
    + qualitative.Safe
)

SOURCE_COLORS = {"live": "#28a745", "fallback": "#fd7e14"}


def color_for(symbol: str) -> str:
    """
    Get a stable color for a symbol.

    Character-sum based, so a symbol keeps its color across processes.

    Args:
        symbol: Token symbol (e.g., "DOGE", "PEPE")

    Returns:
        Hex color string
    """
    return PALETTE[sum(ord(ch) for ch in symbol) % len(PALETTE)]


def heat_colorscale():
    return [[0.0, "#e8f4f8"], [0.5, "#74b9ff"], [1.0, "#0b3d91"]]
