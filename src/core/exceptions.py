"""Error taxonomy for proposal generation."""

from typing import Optional

from src.models import ErrorInfo, ErrorType


class ProposalServiceError(Exception):
    """
    Base class for classified generation failures.

    Subclasses fix the classification, retryability and the message shown
    to users; the technical message varies per raise site.
    """

    error_type: ErrorType = ErrorType.UNKNOWN_ERROR
    retryable: bool = True
    user_message: str = "An unexpected error occurred. Showing demo proposal based on your idea."

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if user_message is not None:
            self.user_message = user_message

    def to_error_info(self) -> ErrorInfo:
        """Convert to the descriptor returned to API clients."""
        return ErrorInfo(
            name=type(self).__name__,
            message=self.message,
            type=self.error_type,
            retryable=self.retryable,
            user_message=self.user_message,
        )


class ProposalValidationError(ProposalServiceError):
    """Input idea or AI response did not have the required shape."""
    error_type = ErrorType.VALIDATION_ERROR
    retryable = False
    user_message = "Please provide a valid project idea"


class QuotaExceededError(ProposalServiceError):
    """The AI service rate limit or daily quota was hit."""
    error_type = ErrorType.QUOTA_EXCEEDED
    retryable = False
    user_message = (
        "AI service quota has been reached for today. Using demo data. "
        "The quota resets daily."
    )


class AuthError(ProposalServiceError):
    """The configured API key was rejected."""
    error_type = ErrorType.AUTH_ERROR
    retryable = False
    user_message = "API authentication failed. Please check your API key configuration."


class ApiError(ProposalServiceError):
    """Non-success response specific to one candidate model."""
    error_type = ErrorType.UNKNOWN_ERROR
    retryable = True
    user_message = "AI services are currently unavailable. Using high-quality demo data based on your idea."

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message, user_message)
        self.status_code = status_code


class ModelNotFoundError(ApiError):
    """The requested model does not exist for this API version."""
    error_type = ErrorType.MODEL_NOT_FOUND


class NetworkError(ApiError):
    """The AI endpoint could not be reached."""
    error_type = ErrorType.NETWORK_ERROR


class GenerationTimeoutError(ProposalServiceError):
    """The AI time budget ran out."""
    error_type = ErrorType.TIMEOUT
    retryable = True
    user_message = "The AI service took too long to respond. Using demo data; please try again."


class UnexpectedError(ProposalServiceError):
    """Failure outside the classified error paths."""
    error_type = ErrorType.UNKNOWN_ERROR
    retryable = True


class PDFGenerationError(Exception):
    """Rendering a proposal to PDF failed."""
