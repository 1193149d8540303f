"""scrypt cost parameters: ``ln=<log2 N>,r=<block size>,p=<parallelism>``."""

from pydantic import BaseModel, Field, ValidationError

from src.phc_common.errors import ParseError
from src.phc_encoding.params import ParamsIterator

_FIELDS = ("ln", "r", "p")


class ScryptParams(BaseModel, frozen=True):
    ln: int = Field(ge=1, le=63)
    r: int = Field(ge=1, lt=1 << 30)
    p: int = Field(ge=1, lt=1 << 30)

    @property
    def n(self) -> int:
        """CPU/memory cost as passed to hashlib.scrypt."""
        return 1 << self.ln

    @classmethod
    def from_phc_string(cls, segment: str) -> "ScryptParams":
        values: dict[str, int] = {}
        for param in ParamsIterator(segment, limit=len(_FIELDS)):
            if param.key not in _FIELDS:
                raise ParseError(f"unknown scrypt parameter {param.key!r}")
            if param.key in values:
                raise ParseError(f"duplicate scrypt parameter {param.key!r}")
            values[param.key] = param.decimal(bits=32)
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ParseError(f"scrypt parameters: {exc.errors()[0]['msg']}") from exc

    def to_phc_string(self) -> str:
        return f"ln={self.ln},r={self.r},p={self.p}"
