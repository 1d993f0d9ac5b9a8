from typing import Iterator

import pytest

from formshape import catalog


@pytest.fixture(autouse=True)
def reset_message_catalog() -> Iterator[None]:
    yield
    catalog.reset()
