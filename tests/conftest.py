"""
Pytest fixtures for the Kadena SDK tests.
"""
import pytest

from kadena_sdk.crypto import Keypair
from kadena_sdk.fetch.config import NetworkConfig
from kadena_sdk.pact import Meta

# RFC 8032 Ed25519 test vector 1
TEST_PRIVATE_KEY = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
TEST_PUBLIC_KEY = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
TEST_EMPTY_SIGNATURE = (
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555fb8821590a33bac"
    "c61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)

TEST_NETWORK = "testnet04"
TEST_CHAIN_ID = "0"
TEST_HOST = "https://api.testnet.chainweb.com/chainweb/0.0/testnet04/chain/0/pact"
TEST_CREATION_TIME = 1700000000


@pytest.fixture(autouse=True)
def _reset_network_cache():
    """Each test starts with an empty network table cache."""
    NetworkConfig._networks_cache = None
    yield
    NetworkConfig._networks_cache = None


@pytest.fixture
def keypair():
    return Keypair.generate()


@pytest.fixture
def known_keypair():
    return Keypair.from_private_key(TEST_PRIVATE_KEY)


@pytest.fixture
def sender(keypair):
    return f"k:{keypair.public_key}"


@pytest.fixture
def meta(sender):
    """Metadata with a pinned creation time so hashes are reproducible"""
    return Meta.new(TEST_CHAIN_ID, sender).with_creation_time(TEST_CREATION_TIME)


@pytest.fixture
def counting_source():
    """Deterministic random source returning 0, 1, 2, ... n-1"""
    def _source(n):
        return bytes(range(n))
    return _source


class BrokenSigner:
    """Signer whose signing device is unavailable"""

    def __init__(self, public_key: str):
        self.public_key = public_key
        self.calls = 0

    def sign(self, message: bytes) -> str:
        self.calls += 1
        raise RuntimeError("signing device unavailable")


@pytest.fixture
def broken_signer():
    return BrokenSigner(Keypair.generate().public_key)
