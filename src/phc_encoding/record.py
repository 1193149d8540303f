"""PHC string record: parser and serializer.

Grammar:
    $<alg_id>[$v=<version>][$<params>]$<salt>[$<derived_key>]

Ref: https://github.com/P-H-C/phc-string-format/blob/master/phc-sf-spec.md
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, Self, TypeVar

from src.phc_common.b64 import b64decode, b64encode
from src.phc_common.integers import parse_unsigned
from src.phc_common.errors import (
    InvalidAlgorithmError,
    InvalidRecordError,
    ParseError,
)
from src.phc_encoding.params import KV_DELIMITER, PARAMS_DELIMITER

FIELDS_DELIMITER = "$"
VERSION_PREFIX = "v="
MAX_ALG_ID_LEN = 32
MAX_VERSION = (1 << 32) - 1


class PhcParams(Protocol):
    """Capability pair every pluggable parameter type provides."""

    @classmethod
    def from_phc_string(cls, segment: str) -> Self: ...

    def to_phc_string(self) -> str: ...


P = TypeVar("P", bound=PhcParams)


@dataclass
class PhcRecord(Generic[P]):
    """Decoded PHC string. Fields unset on the wire are None."""

    alg_id: str
    version: int | None = None
    params: P | None = None
    salt: bytes | None = None
    derived_key: bytes | None = None

    def __post_init__(self) -> None:
        if not _alg_id_ok(self.alg_id) or FIELDS_DELIMITER in self.alg_id:
            raise InvalidRecordError(f"alg_id must be 1-{MAX_ALG_ID_LEN} bytes without '$'")
        if self.version is not None and not (0 <= self.version <= MAX_VERSION):
            raise InvalidRecordError(f"version out of range: {self.version}")
        if self.derived_key is not None and self.salt is None:
            raise InvalidRecordError("derived_key requires a salt")
        if self.salt is not None and not self.salt:
            raise InvalidRecordError("salt must not be empty")
        if self.derived_key is not None and not self.derived_key:
            raise InvalidRecordError("derived_key must not be empty")

    @classmethod
    def from_string(cls, s: str, params_type: type[P]) -> "PhcRecord[P]":
        """Parse a PHC string, delegating the params segment to ``params_type``.

        Nothing is attached to a record until the whole string has been
        consumed, so a failure never leaves a half-populated record behind.
        """
        it = iter(s.split(FIELDS_DELIMITER))
        if next(it):
            raise ParseError("PHC string must start with '$'")

        alg_id = next(it, None)
        if alg_id is None or not _alg_id_ok(alg_id):
            raise ParseError(f"algorithm identifier must be 1-{MAX_ALG_ID_LEN} bytes")
        segment = next(it, None)
        if segment is None:
            return cls(alg_id=alg_id)

        version = None
        if segment.startswith(VERSION_PREFIX) and PARAMS_DELIMITER not in segment:
            version = parse_unsigned(segment[len(VERSION_PREFIX):])
            segment = next(it, None)
            if segment is None:
                return cls(alg_id=alg_id, version=version)

        params = None
        if KV_DELIMITER in segment:
            params = params_type.from_phc_string(segment)
            segment = next(it, None)
            if segment is None:
                return cls(alg_id=alg_id, version=version, params=params)

        salt = b64decode(segment)
        segment = next(it, None)
        if segment is None:
            return cls(alg_id=alg_id, version=version, params=params, salt=salt)

        derived_key = b64decode(segment)
        _expect_end(it)
        return cls(
            alg_id=alg_id,
            version=version,
            params=params,
            salt=salt,
            derived_key=derived_key,
        )

    def to_string(self) -> str:
        """Serialize back to the canonical PHC form."""
        fields = ["", self.alg_id]
        if self.version is not None:
            fields.append(f"{VERSION_PREFIX}{self.version}")
        if self.params is not None:
            fields.append(_params_segment(self.params, versioned=self.version is not None))
        if self.salt is not None:
            fields.append(b64encode(self.salt))
        if self.derived_key is not None:
            fields.append(b64encode(self.derived_key))
        return FIELDS_DELIMITER.join(fields)

    def check_id(self, alg_id: str) -> None:
        """Raise InvalidAlgorithmError unless this record was made by ``alg_id``."""
        if self.alg_id != alg_id:
            raise InvalidAlgorithmError(expected=alg_id, actual=self.alg_id)

    def release(self) -> None:
        """Drop the owned buffers and params. Safe to call repeatedly."""
        self.salt = None
        self.derived_key = None
        self.params = None


def _alg_id_ok(alg_id: str) -> bool:
    return 0 < len(alg_id.encode("utf-8")) <= MAX_ALG_ID_LEN


def _expect_end(it: Iterator[str]) -> None:
    if next(it, None) is not None:
        raise ParseError("unexpected segment after derived key")


def _params_segment(params: PhcParams, versioned: bool) -> str:
    segment = params.to_phc_string()
    # Without '=' the segment would read back as a salt.
    if KV_DELIMITER not in segment or FIELDS_DELIMITER in segment:
        raise InvalidRecordError(f"params serialized to an unparseable segment: {segment!r}")
    # A lone v=N pair in the first slot would read back as the version.
    if not versioned and segment.startswith(VERSION_PREFIX) and PARAMS_DELIMITER not in segment:
        raise InvalidRecordError(f"params segment {segment!r} is indistinguishable from a version")
    return segment
