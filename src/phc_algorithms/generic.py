"""Order-preserving parameter type for algorithms without a dedicated model."""

from pydantic import BaseModel, field_validator

from config.settings import settings
from src.phc_common.errors import ParseError
from src.phc_encoding.params import KV_DELIMITER, MAX_KEY_LEN, PARAMS_DELIMITER, ParamsIterator
from src.phc_encoding.record import FIELDS_DELIMITER

_RESERVED = (FIELDS_DELIMITER, PARAMS_DELIMITER, KV_DELIMITER)


class GenericParams(BaseModel, frozen=True):
    pairs: tuple[tuple[str, str], ...]

    @field_validator("pairs")
    @classmethod
    def pairs_serializable(cls, v: tuple[tuple[str, str], ...]) -> tuple[tuple[str, str], ...]:
        if not v:
            raise ValueError("at least one parameter is required")
        seen: set[str] = set()
        for key, value in v:
            if not key or len(key.encode("utf-8")) > MAX_KEY_LEN:
                raise ValueError(f"parameter key must be 1-{MAX_KEY_LEN} bytes: {key!r}")
            if not value:
                raise ValueError(f"parameter {key!r} has an empty value")
            if any(ch in key or ch in value for ch in _RESERVED):
                raise ValueError(f"parameter {key!r} contains one of {''.join(_RESERVED)}")
            if key in seen:
                raise ValueError(f"duplicate parameter {key!r}")
            seen.add(key)
        return v

    def get(self, key: str) -> str | None:
        for k, v in self.pairs:
            if k == key:
                return v
        return None

    @classmethod
    def from_phc_string(cls, segment: str) -> "GenericParams":
        pairs: list[tuple[str, str]] = []
        seen: set[str] = set()
        for param in ParamsIterator(segment, limit=settings.MAX_PARAMS):
            if param.key in seen:
                raise ParseError(f"duplicate parameter {param.key!r}")
            seen.add(param.key)
            pairs.append((param.key, param.value))
        return cls(pairs=tuple(pairs))

    def to_phc_string(self) -> str:
        return ",".join(f"{k}={v}" for k, v in self.pairs)
