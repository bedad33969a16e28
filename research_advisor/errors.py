"""
Research Advisor Errors

Raised only by the collaborators around the parsers (AI service,
document reading, input checks). The parsers themselves never raise
on malformed replies.
"""


class ResearchAdvisorError(RuntimeError):
    """Base class; `str(error)` is safe to show to the user."""


class InvalidInputError(ResearchAdvisorError, ValueError):
    """Raised when a required form field is blank."""
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class AIServiceError(ResearchAdvisorError):
    """
    Raised when a call to the generative text service fails.

    The message is already mapped to something a user can act on.
    """
    def __init__(self, user_message: str, context: str):
        super().__init__(user_message)
        self.user_message = user_message
        self.context = context


class EmptyResponseError(AIServiceError):
    """Raised when the service answers without any text."""


class DocumentTooShortError(ResearchAdvisorError, ValueError):
    """Raised when an uploaded paper has too little text to critique."""
    def __init__(self, length: int, minimum: int):
        super().__init__(
            "The document does not contain enough text to analyze. "
            "Please upload a valid paper."
        )
        self.length = length
        self.minimum = minimum


class UnsupportedFileTypeError(ResearchAdvisorError, ValueError):
    """Raised for uploads that are not PDF, DOCX, DOC or TXT."""
    def __init__(self, mime_type: str):
        super().__init__(
            f"Unsupported file type: {mime_type}. "
            "Please upload a PDF, DOCX, DOC, or TXT file."
        )
        self.mime_type = mime_type


class DocumentReadError(ResearchAdvisorError):
    """Raised when an uploaded file cannot be read."""
