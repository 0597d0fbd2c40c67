"""Maps client errors to user-facing messages."""

from expert_chat.core.exceptions import ApiError, ClientException

DEFAULT_MESSAGE = "An unexpected error occurred. Please try again later."

STATUS_MESSAGES: dict[int, str] = {
    400: "Invalid request parameters. Please check your input.",
    401: "Authentication required. Please log in again.",
    403: "You do not have permission to perform this action.",
    404: "The requested resource could not be found.",
    422: "Validation failed. Please correct the highlighted fields.",
    500: "A server error occurred. Please try again later.",
}


class ErrorHandler:
    """Turns anything raised by the request pipeline into a stable message."""

    @staticmethod
    def handle(error: object) -> str:
        """Get the user-facing message for an error.

        HTTP errors never echo the response body: known statuses map to fixed
        messages and any other status gets the generic message. Errors raised
        by the client itself (network failures, unsupported operations) keep
        their own message, and plain strings are used as-is.
        """
        if isinstance(error, ApiError):
            return STATUS_MESSAGES.get(error.status, DEFAULT_MESSAGE)

        if isinstance(error, ClientException) and error.message:
            return error.message

        if isinstance(error, str):
            return error

        return DEFAULT_MESSAGE
