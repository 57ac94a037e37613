"""Dash application: layout, callbacks and JSON routes."""
