"""Publishes generated plans to the content bridge endpoint."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

import requests

from core.errors import BridgeError
from core.form import get, text
from core.models import BridgePayload, FormSubmission

logger = logging.getLogger(__name__)

TITLE_TEMPLATE = "AI Marketing Plan for {business_name}"
DEFAULT_SECRET_HEADER = "x-giblink-secret-key"


@dataclass(frozen=True)
class BridgeSettings:
    """Connection settings for the bridge endpoint."""
    url: str
    secret_key: str
    secret_header: str = DEFAULT_SECRET_HEADER
    timeout: float = 30.0

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "BridgeSettings":
        return cls(
            url=config.get('BRIDGE_URL') or '',
            secret_key=config.get('BRIDGE_SECRET_KEY') or '',
            secret_header=config.get('BRIDGE_SECRET_HEADER') or cls.secret_header,
            timeout=float(config.get('BRIDGE_TIMEOUT', cls.timeout)),
        )

    def missing(self) -> List[str]:
        """Names of required settings that are not configured."""
        missing = []
        if not self.url:
            missing.append('GIBLINK_BRIDGE_URL')
        if not self.secret_key:
            missing.append('GIBLINK_BRIDGE_SECRET_KEY')
        return missing


def build_payload(form: FormSubmission, plan: str) -> BridgePayload:
    """Build the bridge payload for a generated plan."""
    user_id = get(form, "user_id")
    return {
        "title": TITLE_TEMPLATE.format(business_name=text(get(form, "business_name"))),
        "content": plan,
        # Absent submitter is published as null; the bridge treats it as unattributed.
        "user_id": user_id if isinstance(user_id, str) and user_id else None,
    }


class BridgePublisher:
    """Posts a single payload per plan to the bridge endpoint."""

    def __init__(self, settings: BridgeSettings):
        self.settings = settings

    def publish(self, payload: BridgePayload) -> None:
        """
        Publish a payload to the bridge.

        Raises:
            BridgeError: missing settings, transport failure, timeout or non-success status
        """
        missing = self.settings.missing()
        if missing:
            raise BridgeError(f"Bridge endpoint is not configured: missing {', '.join(missing)}")

        headers = {
            self.settings.secret_header: self.settings.secret_key,
            "Content-Type": "application/json",
        }
        logger.info(f"Posting '{payload['title']}' to bridge endpoint")
        try:
            response = requests.post(
                self.settings.url,
                headers=headers,
                json=payload,
                timeout=self.settings.timeout,
            )
        except requests.Timeout as e:
            raise BridgeError(f"Bridge request timed out after {self.settings.timeout}s: {e}") from e
        except requests.RequestException as e:
            raise BridgeError(f"Bridge request failed: {e}") from e

        if not response.ok:
            raise BridgeError(
                f"Bridge endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
