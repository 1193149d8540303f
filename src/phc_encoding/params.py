"""Parameter segment iteration: ``key=value,key=value,...``."""

from collections.abc import Iterator
from dataclasses import dataclass

from src.phc_common.integers import parse_unsigned
from src.phc_common.errors import ParseError

PARAMS_DELIMITER = ","
KV_DELIMITER = "="
MAX_KEY_LEN = 32


@dataclass(frozen=True)
class Param:
    """One key/value pair borrowed from a params segment."""

    key: str
    value: str

    def decimal(self, bits: int = 32) -> int:
        """Parse the value as an unsigned decimal that fits in ``bits`` bits."""
        return parse_unsigned(self.value, bits)


class ParamsIterator:
    """Lazy iterator over the pairs of a params segment.

    Pairs are produced left to right. Producing more than ``limit`` pairs
    raises ParseError at the point the limit is crossed, so pairs already
    yielded remain usable by the caller.
    """

    def __init__(self, segment: str, limit: int) -> None:
        self._segment = segment
        self._limit = limit

    def __iter__(self) -> Iterator[Param]:
        for pos, pair in enumerate(self._segment.split(PARAMS_DELIMITER)):
            if pos == self._limit:
                raise ParseError(f"more than {self._limit} parameters")
            yield _split_pair(pair)


def _split_pair(pair: str) -> Param:
    parts = pair.split(KV_DELIMITER)
    if len(parts) != 2:
        raise ParseError(f"parameter {pair!r} must contain exactly one '='")
    key, value = parts
    if not key or len(key.encode("utf-8")) > MAX_KEY_LEN:
        raise ParseError(f"parameter key must be 1-{MAX_KEY_LEN} bytes: {key!r}")
    if not value:
        raise ParseError(f"parameter {key!r} has an empty value")
    return Param(key=key, value=value)
