# File: tests/conftest.py

import pytest
import os
import sys
import logging
from pathlib import Path

# 1. Add project root to path
sys.path.append(os.getcwd())

from wordharvest.features.extensions.domain.models import ExtensionSet


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Keeps wordharvest logs visible to caplog at DEBUG level.
    """
    logging.getLogger("wordharvest").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def text_extensions():
    return ExtensionSet(("txt", "text", "asc"))


@pytest.fixture
def make_tree(tmp_path):
    """
    Builds a directory tree from a {relative_path: content} mapping.
    Content may be str or bytes. Returns the root.
    """
    def _make(files, root_name="corpus"):
        root = tmp_path / root_name
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content)
        return root

    return _make


@pytest.fixture
def unreadable_dirs(monkeypatch):
    """
    Makes os.scandir fail with PermissionError for the registered directories.
    Works even when the tests run as root, where chmod 000 is not enough.
    """
    blocked = set()
    real_scandir = os.scandir

    def fake_scandir(path="."):
        if Path(path) in blocked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    return blocked
