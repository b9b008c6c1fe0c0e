"""Shared test fixtures for the plan webhook."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from tools.bridge_client import BridgeSettings
from tools.llm_client import GenerationSettings


def make_response(status_code=200, json_body=None, text=None):
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if json_body is not None:
        text = json.dumps(json_body)
    response._content = (text or "").encode("utf-8")
    return response


def completion_body(content="PLAN_TEXT"):
    return {
        "id": "chatcmpl-123",
        "model": "gpt-4-turbo-preview",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


@pytest.fixture
def complete_form():
    return {
        "primary_marketing_goal": "Double qualified leads in Q3",
        "business_name": "Acme Studio",
        "vision_statement": "Every small team ships great design",
        "mission_statement": "Affordable design sprints",
        "core_values": "Craft, Candor",
        "primary_competitor": "BigAgency",
        "uvp_differentiator": "we deliver in one week",
        "icp_segment_name": ["Freelancers", "Agencies"],
        "icp_pain_points": ["time", "budget"],
        "icp_watering_holes": ["Twitter", "LinkedIn"],
        "brand_voice_positive_1": "bold",
        "brand_voice_negative_1": "brash",
        "brand_voice_positive_2": "friendly",
        "brand_voice_negative_2": "casual",
        "content_pillars": "speed, quality",
        "offering_name": ["Sprint", "Audit"],
        "key_benefit": ["fast results", "clarity"],
        "user_id": "42",
    }


@pytest.fixture
def generation_settings():
    return GenerationSettings(
        api_key="sk-test",
        url="https://llm.example.test/v1/chat/completions",
        timeout=5.0,
    )


@pytest.fixture
def bridge_settings():
    return BridgeSettings(
        url="https://bridge.example.test/wp-json/plans",
        secret_key="bridge-secret",
        timeout=3.0,
    )


@pytest.fixture
def generator():
    stub = MagicMock()
    stub.generate.return_value = "PLAN_TEXT"
    return stub


@pytest.fixture
def publisher():
    stub = MagicMock()
    stub.publish.return_value = None
    return stub


@pytest.fixture
def app_config():
    return {
        "GENERATION_PROVIDER": "openai",
        "OPENAI_API_KEY": "sk-test",
        "GENERATION_URL": "https://llm.example.test/v1/chat/completions",
        "GENERATION_MODEL": "gpt-4-turbo-preview",
        "GENERATION_TEMPERATURE": 0.7,
        "GENERATION_TIMEOUT": 5,
        "BRIDGE_URL": "https://bridge.example.test/wp-json/plans",
        "BRIDGE_SECRET_KEY": "bridge-secret",
        "BRIDGE_TIMEOUT": 3,
        "CORS_ORIGINS": "*",
    }
