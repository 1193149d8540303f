"""Argon2 parameters: ``m=<KiB>,t=<iterations>,p=<lanes>``."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.phc_common.errors import ParseError
from src.phc_encoding.params import ParamsIterator

_FIELDS = ("m", "t", "p")

ARGON2_VERSION = 19


class Argon2Params(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    memory_cost: int = Field(alias="m", ge=1, lt=1 << 32)
    time_cost: int = Field(alias="t", ge=1, lt=1 << 32)
    parallelism: int = Field(alias="p", ge=1, lt=1 << 24)

    @classmethod
    def from_phc_string(cls, segment: str) -> "Argon2Params":
        values: dict[str, int] = {}
        for param in ParamsIterator(segment, limit=len(_FIELDS)):
            if param.key not in _FIELDS:
                raise ParseError(f"unknown argon2 parameter {param.key!r}")
            if param.key in values:
                raise ParseError(f"duplicate argon2 parameter {param.key!r}")
            values[param.key] = param.decimal(bits=32)
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ParseError(f"argon2 parameters: {exc.errors()[0]['msg']}") from exc

    def to_phc_string(self) -> str:
        return f"m={self.memory_cost},t={self.time_cost},p={self.parallelism}"
