"""
Inbound request record, decoding and identity assignment.

The gateway body looks like:

    {
        "target_polly": "en-US",
        "voice_id": "Joanna",
        "text_to_translate": "Hello there"
    }

``target_polly`` and ``voice_id`` default to empty strings and are passed
through to Polly untouched; Polly rejects combinations it does not know.
``text_to_translate`` is required.
"""
import base64
import binascii
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from speechlink.errors import InvalidRequest

TTL_SECONDS = 30 * 24 * 3600


class SpeechBody(BaseModel):
    """JSON body accepted by the gateway endpoint. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    target_polly: Optional[str] = Field(default="", description="Polly language code")
    voice_id: Optional[str] = Field(default="", description="Polly voice identifier")
    text_to_translate: str = Field(..., description="Text to synthesize")


@dataclass
class SpeechRequest:
    target_language: str = ""
    voice_id: str = ""
    text: Optional[str] = None
    id: str = ""
    ttl: int = 0


def utc_now():
    return datetime.now(timezone.utc)


def new_id():
    return str(uuid.uuid4())


def _read_body(event):
    if not isinstance(event, dict):
        raise InvalidRequest("event must be an object")

    body = event.get("body")
    if body is None:
        raise InvalidRequest("request body is empty")
    if not isinstance(body, (str, bytes)):
        raise InvalidRequest("request body must be a string")

    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidRequest(f"invalid base64 body: {exc}") from exc

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRequest(f"body is not valid UTF-8: {exc}") from exc

    return body


def decode_request(event):
    body = _read_body(event)

    try:
        payload = SpeechBody.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidRequest(str(exc)) from exc

    return SpeechRequest(
        target_language=payload.target_polly or "",
        voice_id=payload.voice_id or "",
        text=payload.text_to_translate,
    )


def assign_identity(request, clock=utc_now, id_factory=new_id):
    """Give the request a fresh unique id and an expiry 30 days from now.

    The expiry is informational; nothing deletes objects when it passes.
    """
    request.id = id_factory()
    request.ttl = int(clock().timestamp()) + TTL_SECONDS
    return request
