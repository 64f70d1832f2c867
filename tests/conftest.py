import pytest

from cache import AddressCache
from directory import HostDirectory
from service import DynamicDNS
from stores import FilesystemStore


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


HOSTS = {
    "AA:BB:CC:DD:EE:FF": {"name": "nas", "hostname": "nas.lan", "room": "attic"},
    "00-11-22-33-44-55": {"name": "printer"},
    "deadbeef0001": {},
}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(tmp_path, clock) -> AddressCache:
    return AddressCache(FilesystemStore(tmp_path), clock=clock)


@pytest.fixture
def directory(cache) -> HostDirectory:
    return HostDirectory(HOSTS, cache)


@pytest.fixture
def ddns(directory) -> DynamicDNS:
    return DynamicDNS(directory, can_delete=True)
