from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(Exception):
    """Raised when a requested resource was not found.

    Attributes are similar to ServiceValidationError. http_status is 404.
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NoValidRecipientsError(ServiceValidationError):
    """Raised when recipient resolution yields no usable address.

    Surfaced before any send attempt, so it is never confused with a
    provider-side send failure.
    """

    def __init__(self, message: str = "No valid e-mail address found for the user or the family members", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details=details, code="NO_VALID_RECIPIENTS")


class CalendarRenderingError(Exception):
    """Raised when a calendar cannot be rendered to text (e.g. unsupported locale).

    Fatal to the current dispatch attempt: nothing is sent. http_status is 500.
    """

    http_status = 500

    def __init__(self, message: str = "Calendar rendering failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = "RENDERING_FAILED"):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class EmailSendError(Exception):
    """Raised by the e-mail adapter when the provider rejects a send.

    Attributes:
        status_code: HTTP status returned by the provider, if any (diagnostics only)
        text: raw provider response text, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None, text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.text = text

    def __str__(self) -> str:
        return self.message
