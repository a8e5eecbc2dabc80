"""
Error Taxonomy
==============

Exceptions raised by the request layer.

    InvalidParameterError -> 400, field-specific message, never retried
    NotFoundError         -> 404
    anything else         -> 500 with a generic message, logged

The field evaluator itself never raises; these only cover request
validation and lookups.
"""


class TrafficAPIError(Exception):
    """Base class for errors with an HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidParameterError(TrafficAPIError):
    """A query parameter is out of range or not an integer."""

    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(TrafficAPIError):
    """The requested resource is absent from the generated set."""

    status_code = 404
