from collections.abc import Iterator

import pytest
import respx

from eventstore_http import Client, Config
from tests.fake_store import STORE_URL, FakeStore


@pytest.fixture()
def store() -> Iterator[FakeStore]:
    with respx.mock(assert_all_called=False) as router:
        yield FakeStore(router)


@pytest.fixture()
def client(store: FakeStore) -> Iterator[Client]:
    with Client(Config(url=STORE_URL)) as client:
        yield client
