from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .main import process_single_export, setup_strength_tracker
from .metrics.aggregation import regroup_time_series
from .storage.data_models import time_series_to_dict
from .utils.config import GROUPINGS, TrackerConfig, get_config, set_config


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _cmd_summary(args: argparse.Namespace) -> int:
    store = setup_strength_tracker(args.storage_dir)
    users = store.users()
    if not users:
        print("No exports loaded.")
        return 0
    for user in users:
        series = store.query(user) or {}
        print(f"{user}: {len(series)} exercises")
        for exercise, points in series.items():
            last = points[-1] if points else None
            last_str = f", last {last.timestamp:%Y-%m-%d} max {last.max_weight:g}" if last else ""
            print(f"  {exercise}: {len(points)} workouts{last_str}")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    if args.file:
        try:
            series = process_single_export(args.file)
        except (OSError, ValueError) as e:
            print(f"Could not process {args.file}: {e}", file=sys.stderr)
            return 1
        payload = time_series_to_dict(regroup_time_series(series, args.grouping))
    else:
        store = setup_strength_tracker(args.storage_dir)
        payload = store.to_json_dict(args.grouping)

    text = json.dumps(payload, indent=2, sort_keys=True)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        print(f"Wrote {args.output}")
    else:
        print(text)
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    # Imported lazily so summary/export work without the web stack loaded
    from .app import create_app

    server = get_config().server
    app = create_app()
    app.run(debug=server.debug, host=server.host, port=server.port)
    return 0


def set_config_from_args(args: argparse.Namespace) -> TrackerConfig:
    config = TrackerConfig.from_env()
    if args.storage_dir:
        config.update_storage_settings(storage_dir=args.storage_dir)
    if getattr(args, "host", None):
        config.update_server_settings(host=args.host)
    if getattr(args, "port", None):
        config.update_server_settings(port=args.port)
    if getattr(args, "debug", False):
        config.update_server_settings(debug=True)
    config.validate_configuration()
    return set_config(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Strength Tracker: lifting progress from Strong CSV exports")
    parser.add_argument("--storage-dir", help="Directory of per-user exports (default: configured storage dir)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_summary = sub.add_parser("summary", help="Load every stored export and print a per-user summary")
    p_summary.set_defaults(func=_cmd_summary)

    p_export = sub.add_parser("export", help="Print or write the aggregated time series as JSON")
    p_export.add_argument("--file", help="Process a single export instead of the storage directory")
    p_export.add_argument("--grouping", choices=GROUPINGS, default="workout")
    p_export.add_argument("--output", "-o", help="Write JSON to this path instead of stdout")
    p_export.set_defaults(func=_cmd_export)

    p_serve = sub.add_parser("serve", help="Run the dashboard and JSON API")
    p_serve.add_argument("--host")
    p_serve.add_argument("--port", type=int)
    p_serve.add_argument("--debug", action="store_true")
    p_serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = set_config_from_args(args)
    _configure_logging(args.log_level or config.server.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
