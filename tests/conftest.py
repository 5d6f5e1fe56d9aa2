import pytest

from tests.helpers.vectors import (
    REFERENCE_ADDRESS,
    REFERENCE_IBAN,
    make_direct_address,
)


@pytest.fixture
def reference_address():
    return REFERENCE_ADDRESS


@pytest.fixture
def reference_iban():
    return REFERENCE_IBAN


@pytest.fixture
def direct_addresses():
    """A batch of random addresses that encode to direct IBANs."""
    return [make_direct_address() for _ in range(25)]


@pytest.fixture(scope="session", autouse=True)
def library_logging():
    """Attach the library's log handler to the session stderr, not to a CliRunner stream."""
    from aioniban.lib.log import _setup_logging

    _setup_logging()
