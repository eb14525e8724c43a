"""Turn a decoded Connect response body into one result variant.

The API does not tag its responses, so the variant is picked by inspecting
which fields are present. Rules are tried in order and the first match wins;
error bodies are checked first because a short error body and a plain
message body can otherwise look alike.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Collection, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ValidationError

from ..errors import UnrecognizedResponse
from .data_models import (
    MESSAGE,
    MFA_MESSAGE,
    Connect,
    Message,
    MfaMask,
    MfaMessage,
    MfaQuestion,
    PlaidError,
)

logger = logging.getLogger(__name__)

Variant = Union[Connect, MfaQuestion, MfaMessage, MfaMask, Message, PlaidError]

ERROR_FIELDS = (
    "code",
    "message",
    "resolve",
    "display_message",
    "error_code",
    "error_message",
    "error_type",
    "request_id",
)
MFA_QUESTIONS_TYPE = "questions"
MFA_DEVICE_TYPE = "device"
MFA_LIST_TYPE = "list"


def _has(body: Mapping[str, Any], key: str) -> bool:
    return body.get(key) is not None


def is_error(body: Mapping[str, Any], expected: Collection[str]) -> bool:
    return (_has(body, "code") or _has(body, "error_code")) and (
        _has(body, "message") or _has(body, "error_message")
    )


def is_mfa_question(body: Mapping[str, Any], expected: Collection[str]) -> bool:
    return body.get("type") == MFA_QUESTIONS_TYPE and isinstance(body.get("mfa"), list)


def is_bare_message(body: Mapping[str, Any]) -> bool:
    """A lone message string, without any resource or MFA fields."""
    if not isinstance(body.get("message"), str):
        return False
    return not any(key in body for key in ("accounts", "access_token", "mfa", "type"))


def _device_message(body: Mapping[str, Any]) -> Optional[str]:
    if body.get("type") != MFA_DEVICE_TYPE:
        return None
    mfa = body.get("mfa")
    if isinstance(mfa, Mapping) and isinstance(mfa.get("message"), str):
        return mfa["message"]
    return None


def is_mfa_message(body: Mapping[str, Any], expected: Collection[str]) -> bool:
    if _device_message(body) is not None:
        return True
    return is_bare_message(body) and MFA_MESSAGE in expected and MESSAGE not in expected


def is_mfa_mask(body: Mapping[str, Any], expected: Collection[str]) -> bool:
    return body.get("type") == MFA_LIST_TYPE and isinstance(body.get("mfa"), list)


def is_connect(body: Mapping[str, Any], expected: Collection[str]) -> bool:
    return "accounts" in body and "access_token" in body


def is_message(body: Mapping[str, Any], expected: Collection[str]) -> bool:
    return is_bare_message(body) and MESSAGE in expected and MFA_MESSAGE not in expected


def _build_error(body: Mapping[str, Any]) -> PlaidError:
    return PlaidError.model_validate({key: body.get(key) for key in ERROR_FIELDS})


def _build_mfa_message(body: Mapping[str, Any]) -> MfaMessage:
    device_message = _device_message(body)
    if device_message is not None:
        return MfaMessage(
            message=device_message,
            type=body.get("type"),
            access_token=body.get("access_token"),
        )
    return MfaMessage(message=body["message"])


def _build_message(body: Mapping[str, Any]) -> Message:
    return Message(message=body["message"])


Rule = Tuple[str, Callable[[Mapping[str, Any], Collection[str]], bool], Callable[[Mapping[str, Any]], BaseModel]]

# Order matters: first match wins.
DECISION_TABLE: List[Rule] = [
    ("error", is_error, _build_error),
    ("mfa_question", is_mfa_question, MfaQuestion.model_validate),
    ("mfa_message", is_mfa_message, _build_mfa_message),
    ("mfa_mask", is_mfa_mask, MfaMask.model_validate),
    ("connect", is_connect, Connect.model_validate),
    ("message", is_message, _build_message),
]


def classify(body: Any, expected: Collection[str] = ()) -> Variant:
    """Pick the result variant for ``body``.

    ``expected`` lists the variant kinds the calling operation can receive;
    it decides whether a bare ``{"message": ...}`` body is an MFA
    instruction or a confirmation. Raises ``UnrecognizedResponse`` when no
    rule matches or the matched shape fails to load.
    """
    if not isinstance(body, Mapping):
        raise UnrecognizedResponse(
            f"Expected a JSON object, got {type(body).__name__}", body=body
        )

    for name, matches, build in DECISION_TABLE:
        if not matches(body, expected):
            continue
        logger.debug("Response classified as %s", name)
        try:
            return build(body)
        except ValidationError as exc:
            raise UnrecognizedResponse(
                f"Response looks like {name} but does not load: {exc.error_count()} invalid field(s)",
                body=body,
            ) from exc

    if is_bare_message(body):
        reason = "message-only body is ambiguous for this operation"
    else:
        reason = f"no known response shape matches keys {sorted(str(key) for key in body)}"
    raise UnrecognizedResponse(f"Unrecognized response: {reason}", body=body)
