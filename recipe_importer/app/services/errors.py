"""Error taxonomy for the recipe extraction pipeline."""

from typing import Optional


class RecipeExtractionError(Exception):
    """Base class for errors surfaced to callers of the extraction pipeline."""

    error_code = "extraction_error"
    status_code = 500
    default_message = "Failed to parse recipe. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(RecipeExtractionError):
    """Raised when the submitted input is missing, blank, or not a string."""

    error_code = "invalid_input"
    status_code = 400
    default_message = "Invalid input. Please provide a URL or recipe text."


class BackendConfigurationError(RecipeExtractionError):
    """Raised when the generative backend credential is not configured."""

    error_code = "server_configuration_error"
    status_code = 500
    default_message = "Server configuration error. Please contact support."


class ExtractionFailure(RecipeExtractionError):
    """Raised when the generative backend call fails."""

    error_code = "extraction_failed"
    status_code = 502


class MalformedResponse(RecipeExtractionError):
    """Raised when the backend output cannot be recovered as a recipe JSON object."""

    error_code = "malformed_response"
    status_code = 502
    default_message = "Failed to parse recipe. Please try again or enter recipe manually."


class MiningSoftFailure(Exception):
    """Raised by page fetching; miners absorb it into fallback content."""
    pass
