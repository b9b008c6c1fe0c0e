from __future__ import annotations

from typing import Any, Dict, List, Literal, NamedTuple, Optional, TypedDict, Union

# A form field is either a single text value or an ordered list of text values
# (one entry per repeated sub-entity, e.g. one per customer segment).
Scalar = str
SequenceValue = List[str]
FieldValue = Union[Scalar, SequenceValue]
FormSubmission = Dict[str, FieldValue]

PipelineStage = Literal["received", "rendered", "generated", "published", "failed", "responded"]


class BridgePayload(TypedDict):
    title: str
    content: str
    user_id: Optional[str]


class ChatMessage(TypedDict):
    role: Literal["user", "assistant", "system"]
    content: str


class ChatCompletionRequest(TypedDict, total=False):
    model: str
    messages: List[ChatMessage]
    temperature: float


class PlanResponse(NamedTuple):
    status_code: int
    body: Dict[str, Any]
