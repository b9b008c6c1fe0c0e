"""Webhook routes for marketing plan generation."""

import logging
from typing import List, Optional

from flask import Blueprint, Flask, current_app, jsonify, request

from core.orchestrator import FAILURE_MESSAGE, PlanOrchestrator

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'plan_webhook'

# Blueprint for plan webhook routes
plan_bp = Blueprint('plan', __name__)


def init_plan_routes(app: Flask, orchestrator: Optional[PlanOrchestrator], missing_settings: List[str]):
    """Attach the wired orchestrator and readiness state to an app."""
    app.extensions[EXTENSION_KEY] = {
        'orchestrator': orchestrator,
        'missing': list(missing_settings),
    }
    if missing_settings:
        logger.warning(f"Plan webhook is not ready: missing {', '.join(missing_settings)}")
    else:
        logger.info("Plan routes initialized")


def _state():
    return current_app.extensions.get(EXTENSION_KEY) or {'orchestrator': None, 'missing': ['startup']}


@plan_bp.route('/health', methods=['GET'])
def health():
    """Liveness check."""
    logger.info("Health check endpoint was hit.")
    return 'OK', 200


@plan_bp.route('/ready', methods=['GET'])
def ready():
    """Readiness check: configuration validated and pipeline wired."""
    state = _state()
    if state['orchestrator'] is None or state['missing']:
        return jsonify({"status": "not_ready", "missing": state['missing']}), 503
    return jsonify({"status": "ready"}), 200


@plan_bp.route('/generate-plan', methods=['POST'])
def generate_plan():
    """Webhook: render the form, generate the plan and publish it to the bridge."""
    logger.info("Webhook received at /generate-plan. Processing...")
    orchestrator = _state()['orchestrator']
    if orchestrator is None:
        logger.error("Plan pipeline is not wired; rejecting webhook")
        return jsonify({"message": FAILURE_MESSAGE}), 500

    body = request.get_json(force=True, silent=True)
    response = orchestrator.handle(body)
    return jsonify(response.body), response.status_code
