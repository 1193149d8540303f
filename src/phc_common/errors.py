"""Unified error codes and custom exceptions for the PHC codec.

Error code ranges:
  1xxx: Parse (grammar, integers, base64)
  2xxx: Algorithm identity
  3xxx: Record construction
"""


class PhcError(Exception):
    """Base codec error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Parse ---

class ParseError(PhcError):
    def __init__(self, detail: str, code: int = 1001) -> None:
        self.detail = detail
        super().__init__(code, f"Malformed PHC string: {detail}")


class IntegerParseError(ParseError):
    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        super().__init__(f"invalid unsigned integer {value!r} ({reason})", 1002)


class Base64DecodeError(ParseError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid base64 segment: {detail}", 1003)


# --- 2xxx: Algorithm ---

class InvalidAlgorithmError(PhcError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(2001, f"Algorithm mismatch: expected {expected}, got {actual}")


class UnsupportedAlgorithmError(PhcError):
    def __init__(self, alg_id: str) -> None:
        self.alg_id = alg_id
        super().__init__(2002, f"No parameter type registered for algorithm: {alg_id}")


# --- 3xxx: Record ---

class InvalidRecordError(PhcError):
    def __init__(self, detail: str) -> None:
        super().__init__(3001, f"Invalid PHC record: {detail}")
