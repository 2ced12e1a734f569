"""Fixed texts used by the wrappers and their errors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "MISSING_ERROR_FIELD",
    "PAYLOAD_UNAVAILABLE",
    "ERROR_UNAVAILABLE",
    "MESSAGE_UNAVAILABLE",
    "MESSAGE_NOT_TEXT",
    "OPTION_PAYLOAD_UNAVAILABLE",
    "SOME_REQUIRES_VALUE",
    "NOTHING_REQUIRES_SENTINEL",
]

# -----------------------------------------------------------------------------
# Result
# -----------------------------------------------------------------------------

# Stored on a Failure built without a message
DEFAULT_FAILURE_MESSAGE = "No message has been provided"

MISSING_ERROR_FIELD = "To create a failed Result provide error"
PAYLOAD_UNAVAILABLE = "Payload is not available"
ERROR_UNAVAILABLE = "No error information is available"
MESSAGE_UNAVAILABLE = "No error message is available"
MESSAGE_NOT_TEXT = "Failure message must be a string"

# -----------------------------------------------------------------------------
# Option
# -----------------------------------------------------------------------------

OPTION_PAYLOAD_UNAVAILABLE = "No payload provided or null"
SOME_REQUIRES_VALUE = "Some requires a present value; use Option.of() for nullable input"
NOTHING_REQUIRES_SENTINEL = "Nothing can only hold None or MISSING"
