"""Main entry point for the Data Dash dashboard."""
from datadash.app.app import create_app, run_app
from datadash.data_manager import DataManager
from datadash.utils import setup_logger

logger = setup_logger(__name__)


def main():
    """Create the dashboard and start serving it."""
    data_manager = DataManager()
    logger.info(f"Watchlist: {', '.join(c.symbol for c in data_manager.available_coins())}")

    app = create_app(data_manager)
    run_app(app)


if __name__ == "__main__":
    main()
