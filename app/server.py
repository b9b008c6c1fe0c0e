"""Main Flask application server."""

import logging
from typing import Any, Dict, Optional

import yaml
from flask import Flask
from flask_cors import CORS

from app.config import load_config
from app.routes.plan_routes import init_plan_routes, plan_bp
from core.errors import StartupError
from core.orchestrator import PlanOrchestrator
from tools.bridge_client import BridgePublisher, BridgeSettings
from tools.llm_client import GenerationClient, GenerationSettings

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _load_startup_config() -> Dict[str, Any]:
    try:
        return load_config()
    except (ValueError, TypeError, AttributeError, yaml.YAMLError, OSError) as e:
        raise StartupError(f"Could not load configuration: {e}") from e


def build_orchestrator(config: Dict[str, Any]):
    """Wire the plan pipeline from configuration.

    Returns the orchestrator and the names of any missing settings.
    """
    try:
        generation = GenerationSettings.from_config(config)
        bridge = BridgeSettings.from_config(config)
    except (TypeError, ValueError) as e:
        raise StartupError(f"Invalid plan webhook configuration: {e}") from e

    orchestrator = PlanOrchestrator(GenerationClient(generation), BridgePublisher(bridge))
    return orchestrator, generation.missing() + bridge.missing()


def create_app(config: Optional[Dict[str, Any]] = None):
    """Create and configure Flask application."""
    # Create Flask app
    app = Flask(__name__)
    app.register_blueprint(plan_bp)

    # A wiring failure must not take down the host: the app still serves
    # /health and reports itself not ready.
    try:
        if config is None:
            config = _load_startup_config()
        orchestrator, missing = build_orchestrator(config)
        init_plan_routes(app, orchestrator, missing)
    except StartupError as e:
        logger.exception(f"!!! FATAL STARTUP ERROR: {e}")
        init_plan_routes(app, None, ['startup'])
        config = config or {}

    app.config['DEBUG'] = config.get('DEBUG', False)

    # Setup CORS
    CORS(app, origins=config.get('CORS_ORIGINS', '*'))

    logger.info("Plan webhook app initialized")
    return app


if __name__ == '__main__':
    config = load_config()
    app = create_app(config)
    host = config.get('HOST', '0.0.0.0')
    port = config.get('PORT', 8000)

    logger.info(f"Starting server on {host}:{port}")
    app.run(host=host, port=port, debug=config.get('DEBUG', False))
