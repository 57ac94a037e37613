"""JSON query surface registered on the Dash server (Flask)."""
from flask import Flask, jsonify, request

from datadash.alerts import deliver_webhook
from datadash.config import API_CACHE_CONTROL
from datadash.data_manager import DataManager, parse_ids
from datadash.utils import setup_logger

logger = setup_logger(__name__)


def register_routes(server: Flask, data_manager: DataManager) -> None:
    """
    Register the REST routes on the Flask server backing the Dash app.

    Args:
        server: Flask server (``app.server`` of the Dash app)
        data_manager: DataManager resolving dashboard requests
    """

    @server.route("/api/arena", methods=["GET"])
    def arena():
        """Dashboard payload for ?interval=..&ids=a,b,c; always 200."""
        interval = request.args.get("interval")
        ids = parse_ids(request.args.get("ids"))
        data = data_manager.load(interval, ids)

        response = jsonify(data.to_dict())
        response.headers["Cache-Control"] = API_CACHE_CONTROL
        return response

    @server.route("/api/watchlist", methods=["GET"])
    def watchlist():
        return jsonify([coin.to_dict() for coin in data_manager.available_coins()])

    @server.route("/api/alerts/webhook", methods=["POST"])
    def alert_webhook():
        body = request.get_json(silent=True) or {}
        if not isinstance(body, dict):
            body = {}
        payload = body.get("payload")
        result, status = deliver_webhook(
            body.get("url"),
            payload=payload if isinstance(payload, dict) else None,
            message=body.get("message"),
        )
        return jsonify(result), status
