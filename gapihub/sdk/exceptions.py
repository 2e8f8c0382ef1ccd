class GapiHubError(Exception):
    """Base class for all gapihub exceptions."""
    pass

class ValidationError(GapiHubError):
    """Base class for errors detected before any request is sent."""
    pass

class ApiError(GapiHubError):
    """Base class for every error a call can end with."""

    def detail(self) -> str:
        """Verbose rendering used by the CLI in debug mode."""
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class HttpError(ApiError):
    """Transport-level failure (DNS, connection, TLS, timeout) that was not retried."""

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error

    def __str__(self):
        return f"HTTP error: {self.error}"


class MissingToken(ApiError):
    """Token acquisition failed and the delegate did not supply a substitute."""

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error

    def __str__(self):
        return f"Token retrieval failed: {self.error}"


class MissingAPIKey(ApiError):
    """An unauthenticated call (no scopes) was made without an API key."""

    def __str__(self):
        return ("An API key is required for calls without scopes; "
                "pass it with param('key', ...) or configure 'api_key'.")


class Failure(ApiError):
    """Non-2xx response whose body is not a structured server error."""

    def __init__(self, response):
        super().__init__(getattr(response, "status_code", None))
        self.response = response

    @property
    def status_code(self):
        return self.response.status_code

    def __str__(self):
        reason = getattr(self.response, "reason", "") or ""
        return f"Http status indicates failure: {self.response.status_code} {reason}".rstrip()


class BadRequest(ApiError):
    """Non-2xx response carrying a structured server error payload."""

    def __init__(self, error_value: dict):
        super().__init__(error_value)
        self.error_value = error_value

    @property
    def _error(self) -> dict:
        inner = self.error_value.get("error") if isinstance(self.error_value, dict) else None
        return inner if isinstance(inner, dict) else {}

    @property
    def code(self):
        return self._error.get("code")

    @property
    def message(self):
        return self._error.get("message")

    @property
    def status(self):
        return self._error.get("status")

    @property
    def details(self):
        return self._error.get("details", [])

    def __str__(self):
        if not self._error:
            return f"Bad Request: {self.error_value}"
        status = f" {self.status}" if self.status else ""
        return f"Bad Request ({self.code}{status}): {self.message}"


class FieldClash(ValidationError, ApiError):
    """An additional parameter collides with a parameter the method already defines."""

    def __init__(self, field: str):
        super().__init__(field)
        self.field = field

    def __str__(self):
        return (f"The custom parameter '{self.field}' is already provided natively "
                f"by the method.")


class JsonDecodeError(ApiError):
    """A 2xx response body did not decode into the expected schema."""

    def __init__(self, body: str, diagnostics: str):
        super().__init__(diagnostics)
        self.body = body
        self.diagnostics = diagnostics

    def __str__(self):
        return f"{self.diagnostics}: {self.body}"


class UploadSizeLimitExceeded(ValidationError, ApiError):
    """The request payload is larger than the method accepts."""

    def __init__(self, size: int, limit: int):
        super().__init__(size, limit)
        self.size = size
        self.limit = limit

    def __str__(self):
        return f"The media size {self.size} exceeds the maximum allowed upload size of {self.limit}"


class Cancelled(ApiError):
    """The delegate abandoned the operation."""

    def __str__(self):
        return "Operation cancelled by delegate"


class UnknownParameter(ValidationError):
    """A CLI parameter name is not accepted by the method."""

    def __init__(self, name: str, accepted: list):
        super().__init__(name)
        self.name = name
        self.accepted = accepted

    def __str__(self):
        return (f"Parameter '{self.name}' is unknown.\n"
                f"Accepted parameters: {', '.join(self.accepted)}")


class InvalidField(ValidationError):
    """A CLI request-body field path does not exist on the request schema."""

    def __init__(self, path: str, suggestion: str = None, reason: str = None):
        super().__init__(path)
        self.path = path
        self.suggestion = suggestion
        self.reason = reason

    def __str__(self):
        text = self.reason or f"Field '{self.path}' does not exist"
        if self.suggestion:
            text += f" - did you mean '{self.suggestion}'?"
        return text
