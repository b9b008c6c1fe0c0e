"""
Plan webhook orchestration.

Runs one form submission through the pipeline:

    received -> rendered -> generated -> published -> responded

Any failure short-circuits to ``failed`` and then ``responded`` with the
uniform error response. Nothing is rolled back; a plan that was generated
but could not be published is discarded.
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import PlanWebhookError
from core.form import parse_form
from core.models import PipelineStage, PlanResponse
from core.prompt_renderer import render
from tools.bridge_client import BridgePublisher, build_payload
from tools.llm_client import GenerationClient

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Plan generated and posted successfully!"
FAILURE_MESSAGE = "An error occurred while generating the plan."


class PlanOrchestrator:
    """Sequences rendering, generation and publishing for one request at a time."""

    def __init__(self, generator: GenerationClient, publisher: BridgePublisher):
        self.generator = generator
        self.publisher = publisher

    def _enter(self, stage: PipelineStage) -> PipelineStage:
        logger.info(f"Plan pipeline stage: {stage}")
        return stage

    def handle(self, body: Any) -> PlanResponse:
        """
        Handle one inbound form submission.

        Args:
            body: Parsed JSON body of the request (None when it could not be parsed)

        Returns:
            PlanResponse with 200 on success, 500 on any failure. Failure
            details are logged and never included in the response body.
        """
        stage = self._enter("received")
        try:
            form = parse_form(body)
            logger.info(f"Received form with fields: {sorted(form)}")

            prompt = render(form)
            stage = self._enter("rendered")

            plan = self.generator.generate(prompt)
            stage = self._enter("generated")

            self.publisher.publish(build_payload(form, plan))
            stage = self._enter("published")
        except PlanWebhookError as e:
            logger.error(f"Plan pipeline failed after stage '{stage}': {e.to_dict()}")
            return self._respond(PlanResponse(500, {"message": FAILURE_MESSAGE}))
        except Exception:
            logger.exception(f"Unexpected error in plan pipeline after stage '{stage}'")
            return self._respond(PlanResponse(500, {"message": FAILURE_MESSAGE}))

        return self._respond(PlanResponse(200, {"message": SUCCESS_MESSAGE}))

    def _respond(self, response: PlanResponse) -> PlanResponse:
        if response.status_code != 200:
            self._enter("failed")
        self._enter("responded")
        return response
