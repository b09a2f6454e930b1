import logging

import pytest

from roswire.core.helpers.utils import setup_logging


@pytest.mark.ut
def test_setup_logging_sets_root_level(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("DEBUG")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
