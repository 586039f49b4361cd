"""
ResponseCode Value Object

Outcome codes carried by every service response envelope.
"""

from enum import Enum

from constants import HTTPStatus


class ResponseCode(str, Enum):
    """
    Immutable outcome code.

    The wire values are single letters so clients written against the
    letter codes keep working; the member names say what each one means.
    """

    VALIDATION_FAILED = "A"
    CREATED = "B"
    FOUND = "C"
    NOT_FOUND = "D"
    LIST_FOUND = "E"
    UPDATED = "G"
    DELETED = "H"

    def carries_payload(self) -> bool:
        """Check if envelopes with this code must carry a payload."""
        return self in {
            ResponseCode.CREATED,
            ResponseCode.FOUND,
            ResponseCode.LIST_FOUND,
            ResponseCode.UPDATED,
        }

    def is_error(self) -> bool:
        """Check if this code reports a failed operation."""
        return self in {ResponseCode.VALIDATION_FAILED, ResponseCode.NOT_FOUND}

    @property
    def http_status(self) -> int:
        """HTTP status an API layer should answer with for this code."""
        statuses = {
            ResponseCode.VALIDATION_FAILED: HTTPStatus.BAD_REQUEST,
            ResponseCode.CREATED: HTTPStatus.CREATED,
            ResponseCode.FOUND: HTTPStatus.OK,
            ResponseCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
            ResponseCode.LIST_FOUND: HTTPStatus.OK,
            ResponseCode.UPDATED: HTTPStatus.OK,
            ResponseCode.DELETED: HTTPStatus.OK,
        }
        return statuses[self]
