"""Algorithm registry: maps PHC algorithm identifiers to parameter types.

Hashing callers go through decode()/encode() so that the parameter type is
picked from the identifier rather than passed around by hand.
"""

import logging

from config.settings import settings
from src.phc_algorithms.argon2 import Argon2Params
from src.phc_algorithms.generic import GenericParams
from src.phc_algorithms.scrypt import ScryptParams
from src.phc_common.errors import PhcError, UnsupportedAlgorithmError
from src.phc_encoding.record import FIELDS_DELIMITER, PhcParams, PhcRecord

logger = logging.getLogger(__name__)

_registry: dict[str, type[PhcParams]] = {}


def configure_logging(level: str | None = None) -> None:
    """Apply ``level`` (default: settings.LOG_LEVEL) to the package loggers."""
    for name in ("src.phc_algorithms", "src.phc_encoding"):
        logging.getLogger(name).setLevel((level or settings.LOG_LEVEL).upper())


def register(alg_id: str, params_type: type[PhcParams]) -> None:
    if alg_id in _registry and _registry[alg_id] is not params_type:
        logger.warning(
            "Replacing params type for %s: %s -> %s",
            alg_id, _registry[alg_id].__name__, params_type.__name__,
        )
    _registry[alg_id] = params_type


def params_type_for(alg_id: str, strict: bool = True) -> type[PhcParams]:
    """Look up the params type for ``alg_id``.

    With ``strict=False`` unknown identifiers fall back to GenericParams.
    """
    params_type = _registry.get(alg_id)
    if params_type is None:
        if strict:
            raise UnsupportedAlgorithmError(alg_id)
        return GenericParams
    return params_type


def decode(s: str, expected_alg: str | None = None, strict: bool = True) -> PhcRecord:
    """Parse ``s`` with the params type registered for its algorithm."""
    alg_id = _peek_alg_id(s)
    try:
        if strict and alg_id not in _registry:
            # Malformed input reports ParseError before the unknown id.
            PhcRecord.from_string(s, GenericParams)
            raise UnsupportedAlgorithmError(alg_id)
        record = PhcRecord.from_string(s, params_type_for(alg_id, strict=strict))
        if expected_alg is not None:
            record.check_id(expected_alg)
    except PhcError as exc:
        logger.info("Rejected PHC string for %r: code=%d %s", alg_id, exc.code, exc.message)
        raise
    logger.debug("Decoded PHC string: alg=%s version=%s", record.alg_id, record.version)
    return record


def encode(record: PhcRecord) -> str:
    return record.to_string()


def _peek_alg_id(s: str) -> str:
    # The parser does the real validation; this only picks the params type.
    parts = s.split(FIELDS_DELIMITER, 2)
    return parts[1] if len(parts) > 1 else ""


register("scrypt", ScryptParams)
for _variant in ("argon2i", "argon2d", "argon2id"):
    register(_variant, Argon2Params)
