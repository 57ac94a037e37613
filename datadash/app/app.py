"""Main Dash application setup."""
from dash import Dash

from datadash.app import api, callbacks, layout
from datadash.config import DASH_DEBUG, DASH_PORT
from datadash.data_manager import DataManager
from datadash.utils import setup_logger

logger = setup_logger(__name__)


def create_app(data_manager: DataManager) -> Dash:
    """
    Create and configure the Dash application.

    Args:
        data_manager: DataManager resolving dashboard requests

    Returns:
        Configured Dash application with the JSON routes on its Flask server
    """
    app = Dash(__name__, title="Data Dash")

    # Set layout
    app.layout = layout.create_layout(data_manager.available_coins())

    # Register callbacks and REST routes
    callbacks.register_callbacks(app, data_manager)
    api.register_routes(app.server, data_manager)

    return app


def run_app(app: Dash) -> None:
    """Run the Dash application."""
    startup_msg = f"Starting Dash… open http://127.0.0.1:{DASH_PORT}/"
    logger.info(startup_msg)
    app.run(debug=DASH_DEBUG, port=DASH_PORT)
