"""Error taxonomy surfaced at the request boundary as ``{success, message}``."""


class ResumeBuilderError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ResumeBuilderError):
    """Missing or insufficient input the user can fix."""
    status_code = 400


class ExtractionError(ResumeBuilderError):
    """An accepted upload could not be turned into text."""
    status_code = 500


class MissingCredentials(ResumeBuilderError):
    """No LLM provider key is configured."""
    status_code = 500


class ProviderError(ResumeBuilderError):
    """The upstream LLM call failed."""
    status_code = 500
