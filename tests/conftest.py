import pytest

from atcrypt.keypair import K256Keypair, P256Keypair

from tests.vectors import INTEROP_MESSAGE


@pytest.fixture
def message() -> bytes:
    return INTEROP_MESSAGE


@pytest.fixture(params=[P256Keypair, K256Keypair], ids=["p256", "k256"])
def keypair_cls(request):
    return request.param


@pytest.fixture
def keypair(keypair_cls):
    return keypair_cls.generate(exportable=True)
