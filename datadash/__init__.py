"""Data Dash: memecoin market analytics dashboard."""

__version__ = "0.1.0"
