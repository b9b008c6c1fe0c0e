"""Form submission boundary: validation and safe field access."""

from __future__ import annotations

from typing import Any, Dict, List

from core.errors import FormValidationError
from core.models import FieldValue, FormSubmission

MISSING_ENTRY = "N/A"


def _scalar_text(key: str, value: Any) -> str:
    """Render a JSON scalar as text; booleans follow JSON spelling."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise FormValidationError(
        f"Field '{key}' has unsupported type {type(value).__name__}",
        details={"field": key},
    )


def _normalize_value(key: str, value: Any) -> FieldValue:
    if isinstance(value, list):
        items: List[str] = []
        for item in value:
            if item is None:
                items.append("")
            elif isinstance(item, (list, dict)):
                raise FormValidationError(
                    f"Field '{key}' contains a nested value",
                    details={"field": key},
                )
            else:
                items.append(_scalar_text(key, item))
        return items
    return _scalar_text(key, value)


def parse_form(body: Any) -> FormSubmission:
    """
    Validate an inbound JSON body into a FormSubmission.

    Every kept value is either a Scalar (str) or a Sequence (list of str).
    Null values are dropped so they read as absent fields.

    Raises:
        FormValidationError: body is not an object, or a field holds an
            object or nested list.
    """
    if not isinstance(body, dict):
        raise FormValidationError(
            "Form submission must be a JSON object",
            details={"type": type(body).__name__},
        )

    form: Dict[str, FieldValue] = {}
    for key, value in body.items():
        if value is None:
            continue
        form[str(key)] = _normalize_value(str(key), value)
    return form


def get(form: FormSubmission, key: str) -> FieldValue:
    """Get a field value, or an empty string when it is absent or empty."""
    return form.get(key) or ""


def get_at(form: FormSubmission, key: str, index: int) -> str:
    """Get entry ``index`` of a repeated field, or ``N/A`` when there is none."""
    value = get(form, key)
    if not isinstance(value, list) or index < 0 or index >= len(value):
        return MISSING_ENTRY
    return value[index] or MISSING_ENTRY


def text(value: FieldValue) -> str:
    """Render a field value for interpolation into the prompt."""
    if isinstance(value, list):
        return ", ".join(value)
    return value
