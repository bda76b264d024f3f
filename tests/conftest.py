from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def clear_lrucache_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("LRUCACHE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_lrucache_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("lrucache")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
