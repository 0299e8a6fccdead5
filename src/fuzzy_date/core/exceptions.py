class FuzzyDateError(Exception):
    """Base exception for fuzzy_date failures that are not parse results."""


class ValidationError(FuzzyDateError):
    """Raised when canonical JSON does not have the expected shape."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class PipelineError(FuzzyDateError):
    """Base exception for batch pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when a batch run is aborted."""
