"""Dash app factory for the Strength Tracker UI and JSON API."""

import logging
from typing import Optional

from dash import Dash
import dash_bootstrap_components as dbc
from flask import jsonify, request

from .callbacks import register_callbacks
from .layout import build_layout
from .main import setup_strength_tracker
from .storage.data_models import time_series_to_dict
from .storage.user_store import UserDataStore
from .utils.config import GROUPINGS, get_config

logger = logging.getLogger(__name__)


def register_api_routes(app: Dash, store: UserDataStore) -> None:
    """Attach the data and upload endpoints to the underlying Flask server."""
    server = app.server
    server.config["MAX_CONTENT_LENGTH"] = get_config().storage.max_upload_bytes

    @server.route("/api/data", methods=["GET"])
    def api_data():
        grouping = request.args.get("grouping", "workout")
        if grouping not in GROUPINGS:
            return jsonify(error=f"Unknown grouping: {grouping}"), 400
        return jsonify(store.to_json_dict(grouping))

    @server.route("/api/data/<user>", methods=["GET"])
    def api_user_data(user):
        series = store.query(user)
        if series is None:
            return jsonify(error=f"No data for user: {user}"), 404
        return jsonify(time_series_to_dict(series))

    @server.route("/upload", methods=["POST"])
    def upload():
        user = request.form.get("user", "")
        upload_file = request.files.get("file")
        if not user.strip() or upload_file is None:
            return "Both 'user' and 'file' are required", 400

        logger.info(f"Upload from {user}: {upload_file.filename}")
        try:
            store.ingest_upload(user, upload_file.read())
        except (OSError, ValueError) as e:
            logger.error(f"Upload of {upload_file.filename} for {user} failed: {e}")
            return f"'{upload_file.filename}' could not be loaded: {e}", 422

        return f"'{upload_file.filename}' uploaded!", 200


def create_app(store: Optional[UserDataStore] = None) -> Dash:
    """Create and configure the Dash application instance.

    Args:
        store: Store to serve; by default one is built over the configured
            storage directory and loaded once.

    Returns:
        Dash: Configured Dash application.
    """
    if store is None:
        store = setup_strength_tracker()

    app = Dash(
        __name__,
        title="Strength Tracker",
        external_stylesheets=[dbc.themes.DARKLY],
        suppress_callback_exceptions=True,
        compress=get_config().server.compress,
    )

    app.layout = build_layout
    register_callbacks(app, store)
    register_api_routes(app, store)

    return app
