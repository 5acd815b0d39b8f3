"""UI layout for the Strength Tracker Dash app."""

from dash import dcc, html
import dash_bootstrap_components as dbc

from .charts import METRIC_LABELS
from .utils.config import GROUPINGS, get_config


def _upload_card():
    return dbc.Card([
        dbc.CardHeader("Upload Export"),
        dbc.CardBody([
            dbc.Label("User"),
            dcc.Input(id="upload-user", placeholder="Your name", type="text", className="mb-2 w-100"),
            dcc.Upload(
                id="export-upload",
                children=html.Div(["Drop a Strong CSV export here or ", html.A("select a file")]),
                multiple=False,
                style={
                    "borderWidth": "1px",
                    "borderStyle": "dashed",
                    "borderRadius": "6px",
                    "textAlign": "center",
                    "padding": "20px",
                },
            ),
            html.Div(id="upload-status", className="mt-2 font-monospace"),
        ]),
    ])


def _controls_card():
    dashboard = get_config().dashboard
    return dbc.Card([
        dbc.CardHeader("Display"),
        dbc.CardBody([
            dbc.Label("Metric"),
            dbc.RadioItems(
                id="metric-select",
                options=[{"label": label, "value": key} for key, label in METRIC_LABELS.items()],
                value=dashboard.default_metric,
                inline=True,
                className="mb-3",
            ),
            dbc.Label("Grouping"),
            dbc.RadioItems(
                id="grouping-select",
                options=[{"label": g.capitalize(), "value": g} for g in GROUPINGS],
                value=dashboard.default_grouping,
                inline=True,
                className="mb-3",
            ),
            dbc.Label("Exercises"),
            dcc.Dropdown(
                id="exercise-select",
                options=[{"label": e, "value": e} for e in dashboard.featured_exercises],
                value=list(dashboard.featured_exercises),
                multi=True,
            ),
        ]),
    ])


def build_layout():
    """Construct the base application layout."""
    return dbc.Container(
        fluid=True,
        children=[
            # Bumped after each successful upload to refresh dependent views
            dcc.Store(id="data-version", data=0),

            html.Header(
                role="banner",
                className="my-3",
                children=[
                    html.H1("Strength Tracker"),
                    html.P("Track lifting progress from Strong app exports.", className="text-muted"),
                ],
            ),

            dbc.Row([
                dbc.Col(_controls_card(), width=8),
                dbc.Col(_upload_card(), width=4),
            ], className="mb-4"),

            html.Main(
                role="main",
                children=[html.Div(id="charts-container")],
            ),

            html.Footer(role="contentinfo", className="my-3", children=[html.Small("v1.0.0")]),
        ],
    )
