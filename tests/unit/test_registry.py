"""Tests for phc_algorithms.registry — algorithm lookup and decode/encode."""

import logging

import pytest

from src.phc_algorithms import registry
from src.phc_algorithms.argon2 import Argon2Params
from src.phc_algorithms.generic import GenericParams
from src.phc_algorithms.scrypt import ScryptParams
from src.phc_common.errors import (
    InvalidAlgorithmError,
    ParseError,
    UnsupportedAlgorithmError,
)
from src.phc_encoding.record import PhcRecord

ARGON2_PHC = "$argon2id$v=19$m=65536,t=3,p=4$c2FsdHNhbHQ$dGVzdHBhc3M"


class TestLookup:
    def test_defaults(self) -> None:
        assert registry.params_type_for("scrypt") is ScryptParams
        for alg_id in ("argon2i", "argon2d", "argon2id"):
            assert registry.params_type_for(alg_id) is Argon2Params

    def test_unknown_strict(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            registry.params_type_for("pbkdf2-sha256")
        assert exc_info.value.code == 2002

    def test_unknown_lenient(self) -> None:
        assert registry.params_type_for("pbkdf2-sha256", strict=False) is GenericParams

    def test_register(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(registry._registry, "pbkdf2-sha256", GenericParams)
        record = registry.decode("$pbkdf2-sha256$i=29000$YWJj$YWJj")
        assert record.params == GenericParams(pairs=(("i", "29000"),))


class TestDecode:
    def test_scrypt(self, scrypt_phc: str) -> None:
        record = registry.decode(scrypt_phc)
        assert isinstance(record.params, ScryptParams)
        assert record.derived_key == b"testpass"

    def test_argon2(self) -> None:
        record = registry.decode(ARGON2_PHC, expected_alg="argon2id")
        assert record.params == Argon2Params(m=65536, t=3, p=4)
        assert record.version == 19

    def test_expected_alg_mismatch(self, scrypt_phc: str) -> None:
        with pytest.raises(InvalidAlgorithmError):
            registry.decode(scrypt_phc, expected_alg="argon2id")

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            registry.decode("$md5-crypt$YWJj")

    def test_unknown_algorithm_lenient(self) -> None:
        record = registry.decode("$md5-crypt$r=1000$YWJj", strict=False)
        assert record.params == GenericParams(pairs=(("r", "1000"),))

    def test_malformed_reports_parse_error(self) -> None:
        with pytest.raises(ParseError):
            registry.decode("$")

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="src.phc_algorithms.registry"):
            with pytest.raises(ParseError):
                registry.decode("$scrypt$ln=15,r=8,p=1$c2FsdHNhbHQ$dGVzdHBhc3M$extra")
        assert "code=1001" in caplog.text


class TestEncode:
    def test_round_trip(self) -> None:
        assert registry.encode(registry.decode(ARGON2_PHC)) == ARGON2_PHC

    def test_direct_record(self) -> None:
        record = PhcRecord(alg_id="scrypt", params=ScryptParams(ln=14, r=8, p=1), salt=b"a")
        assert registry.encode(record) == "$scrypt$ln=14,r=8,p=1$YQ"


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        logger = logging.getLogger("src.phc_algorithms")
        previous = logger.level
        try:
            registry.configure_logging("debug")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
