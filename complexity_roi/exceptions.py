"""Custom exception hierarchy for the complexity-roi library."""


class ComplexityROIError(Exception):
    """Base exception for all complexity-roi library errors."""


class ConfigurationError(ComplexityROIError):
    """Invalid configuration parameters or missing required arguments."""


class DataError(ComplexityROIError):
    """Invalid input data: wrong type, missing columns, or empty dataset."""


class RecordValidationError(DataError):
    """A file record failed validation.

    Parameters
    ----------
    field : str
        Name of the offending record field.
    message : str
        Human-readable description of the failure.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
