from collections.abc import Iterator

import pytest

from fileref.config import reset_config


@pytest.fixture(autouse=True)
def _clean_config() -> Iterator[None]:
    reset_config()
    yield
    reset_config()
