from pydantic import BaseModel

from src.phc_common.b64 import b64encode
from src.phc_encoding.params import PARAMS_DELIMITER, ParamsIterator
from src.phc_encoding.record import PhcRecord


class PhcRecordView(BaseModel):
    """JSON-friendly snapshot of a parsed record (salt and hash kept as base64)."""

    alg_id: str
    version: int | None = None
    params: dict[str, str] | None = None
    salt: str | None = None
    derived_key: str | None = None

    @classmethod
    def from_record(cls, record: PhcRecord) -> "PhcRecordView":
        params = None
        if record.params is not None:
            segment = record.params.to_phc_string()
            pair_count = segment.count(PARAMS_DELIMITER) + 1
            params = {p.key: p.value for p in ParamsIterator(segment, limit=pair_count)}
        return cls(
            alg_id=record.alg_id,
            version=record.version,
            params=params,
            salt=None if record.salt is None else b64encode(record.salt),
            derived_key=None if record.derived_key is None else b64encode(record.derived_key),
        )
