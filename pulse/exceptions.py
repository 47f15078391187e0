"""
Domain error taxonomy.

Every error carries the HTTP status it maps to and a message that is safe to show
to the client. Upstream details stay in the server log.
"""


class PulseError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ======================
# CLIENT ERRORS
# ======================

class ValidationError(PulseError):
    status_code = 400
    default_message = "Invalid request"


class InvalidQueryError(ValidationError):
    default_message = "Search type and query are required"


class AuthenticationError(PulseError):
    status_code = 401
    default_message = "Invalid email or password"


class VerificationError(AuthenticationError):
    status_code = 400
    default_message = "Invalid verification code."


class AlreadyLikedError(PulseError):
    status_code = 400
    default_message = "You have already liked this review"


class AlreadyVerifiedError(PulseError):
    status_code = 400
    default_message = "Email already verified. Please login instead."


class NotFoundError(PulseError):
    status_code = 404
    default_message = "Not found"


class ReviewNotFoundError(NotFoundError):
    default_message = "Review not found"


class AccountNotFoundError(NotFoundError):
    default_message = "No account found with this email"


# ======================
# UPSTREAM ERRORS
# ======================

class UpstreamError(PulseError):
    status_code = 500
    default_message = "Upstream service error"


class TransientError(UpstreamError):
    """Timeout or connectivity failure; the same request may succeed later."""

    status_code = 503
    default_message = "Service temporarily unavailable, please try again"


class SummarizationError(UpstreamError):
    default_message = "Unable to summarize reviews right now"


class SummarizationTimeoutError(SummarizationError, TransientError):
    status_code = 503
    default_message = "Summarization timed out, please try again"
