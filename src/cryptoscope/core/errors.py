"""
Error Types
Exceptions raised by the byte codecs, breakers and detectors
"""


class CryptoscopeError(ValueError):
    """Base class for all Cryptoscope errors"""


class MalformedInput(CryptoscopeError):
    """Input text or bytes do not follow the expected encoding"""


class LengthMismatch(CryptoscopeError):
    """Two buffers were required to have the same length"""

    def __init__(self, left: int, right: int):
        super().__init__(f"Buffers need to be of same length (got {left} and {right})")
        self.left = left
        self.right = right


class InsufficientData(CryptoscopeError):
    """Buffer is too short for the requested operation"""
