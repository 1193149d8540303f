"""Shared test fixtures."""

import pytest

SCRYPT_PHC = "$scrypt$v=1$ln=15,r=8,p=1$c2FsdHNhbHQ$dGVzdHBhc3M"


@pytest.fixture
def scrypt_phc() -> str:
    """Reference scrypt PHC string (salt=b'saltsalt', hash=b'testpass')."""
    return SCRYPT_PHC
