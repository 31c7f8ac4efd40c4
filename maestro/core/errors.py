"""Error types raised by agent operations.

Every failure surfaces as a subclass of MaestroError so callers can tell an
empty completion apart from a failed call. The ``code`` attribute is the
machine-readable tag the HTTP layer puts in its error payload.
"""


class MaestroError(Exception):
    """Base class for all agent errors."""

    code = "maestro_error"
    recoverable = True

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(MaestroError):
    """The caller broke an operation's contract. Raised before any network call."""

    code = "invalid_argument"


class UnsupportedAudio(InvalidArgument):
    """The file is missing, too small, or not a recognized audio container."""

    code = "unsupported_audio"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unsupported audio file '{path}': {reason}")
        self.path = path
        self.reason = reason


class AttachmentFailed(MaestroError):
    """The file ingestion service rejected or failed to process an upload."""

    code = "attachment_failed"

    def __init__(self, message: str, file_name: str | None = None) -> None:
        super().__init__(message)
        self.file_name = file_name


class AttachmentTimeout(AttachmentFailed):
    """The upload never left the processing state within the poll budget."""

    code = "attachment_timeout"


class RemoteCallFailed(MaestroError):
    """The generation call raised (network, API or malformed response)."""

    code = "remote_call_failed"


class SchemaDecodeFailed(MaestroError):
    """A structured-output completion did not decode into the expected shape."""

    code = "schema_decode_failed"
    recoverable = False


class NotConfigured(MaestroError):
    """A required setting (such as GEMINI_API_KEY) is missing."""

    code = "not_configured"
    recoverable = False
