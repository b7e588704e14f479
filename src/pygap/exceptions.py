"""
Custom exceptions for PyGap.
Provides domain-specific error handling with informative messages.
"""


class GapError(Exception):
    """Base exception for all PyGap errors."""
    pass


class ConfigurationError(GapError):
    """Raised when the species catalog or simulation constants are invalid."""
    pass


class InvalidParameterError(ConfigurationError):
    """Raised when a parameter value is invalid."""
    def __init__(self, param_name: str, value, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        message = f"Invalid value for parameter '{param_name}': {value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class SpeciesNotFoundError(GapError, IndexError):
    """Raised when a species id or name is not present in the catalog."""
    def __init__(self, species, catalog_size: int):
        self.species = species
        self.catalog_size = catalog_size
        super().__init__(f"Species {species!r} not found in catalog "
                         f"({catalog_size} species, ids 0-{catalog_size - 1})")


class SimulationError(GapError):
    """Raised when the simulation driver is used incorrectly."""
    pass


class DataError(GapError):
    """Raised when there are data-related issues."""
    pass


class ConfigFileNotFoundError(DataError):
    """Raised when a required configuration file is not found."""
    def __init__(self, file_path: str, file_type: str = "file"):
        self.file_path = file_path
        self.file_type = file_type
        super().__init__(f"Required {file_type} not found: {file_path}")


class InvalidDataError(DataError):
    """Raised when data is malformed or invalid."""
    def __init__(self, data_description: str, reason: str):
        self.data_description = data_description
        self.reason = reason
        super().__init__(f"Invalid {data_description}: {reason}")


# Validation utilities
def validate_positive(value: float, param_name: str) -> float:
    """Validate that a value is positive.

    Args:
        value: Value to validate
        param_name: Parameter name for error message

    Returns:
        The validated value

    Raises:
        InvalidParameterError: If value is not positive
    """
    if value <= 0:
        raise InvalidParameterError(param_name, value, "must be positive")
    return value


def validate_proportion(value: float, param_name: str) -> float:
    """Validate that a value is a valid proportion (0-1).

    Args:
        value: Value to validate
        param_name: Parameter name for error message

    Returns:
        The validated value

    Raises:
        InvalidParameterError: If value is not in [0, 1]
    """
    if not 0 <= value <= 1:
        raise InvalidParameterError(param_name, value, "must be between 0 and 1")
    return value
