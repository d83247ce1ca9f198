class RobotLoggerError(Exception):
    """Base class for my_2d_robot errors."""

class ConfigurationError(RobotLoggerError):
    """Raised when a required parameter is missing or invalid."""

class StorageUnavailableError(RobotLoggerError):
    """Raised when the output file or its directory cannot be written."""

class MalformedSampleError(RobotLoggerError):
    """Raised when a joint sample has the wrong field cardinality."""
