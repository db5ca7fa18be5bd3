"""
Custom exceptions for cube operations.
"""


class CubularError(Exception):
    """Base class for all cube errors"""
    def __init__(self, message: str, error_type: str = None, details: dict = None):
        self.message = message
        self.error_type = error_type or "CubularError"
        self.details = details or {}
        super().__init__(self.message)


class InvalidFaceError(CubularError, ValueError):
    """Raised when a face value is outside the defined faces"""
    def __init__(self, message: str, value=None, details: dict = None):
        self.value = value
        super().__init__(message, "InvalidFaceError", details)


class InvalidRotationError(CubularError, ValueError):
    """Raised when a rotation amount is outside the defined rotations"""
    def __init__(self, message: str, value=None, details: dict = None):
        self.value = value
        super().__init__(message, "InvalidRotationError", details)


class InvalidSeedError(CubularError, ValueError):
    """Raised when a seed is not an unsigned 64-bit integer"""
    def __init__(self, message: str, value=None, details: dict = None):
        self.value = value
        super().__init__(message, "InvalidSeedError", details)


class InvalidCubeError(CubularError, ValueError):
    """Raised when cube data has the wrong shape or holds unknown colors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "InvalidCubeError", details)
