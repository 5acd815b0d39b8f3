"""Callbacks registration for the Strength Tracker app."""

import base64
import binascii
import logging
from typing import Optional, Tuple

from dash import Dash, Input, Output, State, dcc, html, no_update
import dash_bootstrap_components as dbc

from .charts import build_exercise_figure, list_exercises
from .storage.user_store import UserDataStore
from .utils.config import get_config

logger = logging.getLogger(__name__)


def decode_upload_contents(contents: str) -> bytes:
    """Decode the data URL produced by dcc.Upload into raw bytes."""
    _, _, encoded = contents.partition(",")
    try:
        return base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Upload is not valid base64 data: {e}") from e


def handle_upload(store: UserDataStore, user: Optional[str], filename: Optional[str],
                  contents: Optional[str]) -> Tuple[bool, str]:
    """Store an export uploaded through the dashboard.

    Returns:
        (success, message to display)
    """
    if not user or not user.strip():
        return False, "Enter a user name before uploading."
    if not contents:
        return False, "No file uploaded."

    try:
        content = decode_upload_contents(contents)
        if len(content) > get_config().storage.max_upload_bytes:
            return False, f"'{filename}' is too large."
        series = store.ingest_upload(user, content)
    except (OSError, ValueError) as e:
        logger.error(f"Upload of {filename} for {user} failed: {e}")
        return False, f"❌ '{filename}' could not be loaded: {e}"

    return True, f"✅ '{filename}' uploaded ({len(series)} exercises)."


def register_callbacks(app: Dash, store: UserDataStore) -> None:
    """Register all application callbacks."""

    @app.callback(
        Output("upload-status", "children"),
        Output("data-version", "data"),
        Input("export-upload", "contents"),
        State("export-upload", "filename"),
        State("upload-user", "value"),
        State("data-version", "data"),
        prevent_initial_call=True,
    )
    def on_upload(contents, filename, user, version):
        success, message = handle_upload(store, user, filename, contents)
        return message, (version or 0) + 1 if success else no_update

    @app.callback(
        Output("exercise-select", "options"),
        Input("data-version", "data"),
    )
    def refresh_exercise_options(_version):
        names = set(get_config().dashboard.featured_exercises)
        names.update(list_exercises(store.to_json_dict()))
        return [{"label": name, "value": name} for name in sorted(names)]

    @app.callback(
        Output("charts-container", "children"),
        Input("metric-select", "value"),
        Input("grouping-select", "value"),
        Input("exercise-select", "value"),
        Input("data-version", "data"),
    )
    def render_charts(metric, grouping, exercises, _version):
        if not exercises:
            return html.P("Select at least one exercise.", className="text-muted")

        data = store.to_json_dict(grouping)
        return dbc.Row([
            dbc.Col(
                dcc.Graph(
                    figure=build_exercise_figure(data, exercise, metric),
                    config={"displayModeBar": False},
                ),
                width=6,
                className="mb-4",
            )
            for exercise in exercises
        ])
