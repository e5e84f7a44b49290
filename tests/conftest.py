from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.spec_tree import SpecTreeBuilder


@pytest.fixture
def spec_tree(tmp_path: Path) -> SpecTreeBuilder:
    """Provide a source root builder rooted at the pytest tmp_path."""
    return SpecTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_restspecs_logger():
    """Undo CLI logging setup so caplog sees records from every test."""
    yield
    logger = logging.getLogger("restspecs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
