"""Entrypoint to run the Strength Tracker Dash application."""

import logging

from strength_tracker.app import create_app
from strength_tracker.utils.config import TrackerConfig, set_config


config = set_config(TrackerConfig.from_env())
logging.basicConfig(level=getattr(logging, config.server.log_level, logging.INFO))

app = create_app()
server = app.server


if __name__ == "__main__":
    app.run(debug=config.server.debug, host=config.server.host, port=config.server.port)
