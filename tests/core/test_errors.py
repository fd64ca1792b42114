import pytest
from pathlib import Path

from wordharvest.core.common.enums import ErrorKind
from wordharvest.core.common.errors import (
    HarvestError,
    UnsupportedExtensionError,
    DirectoryUnreadableError,
    TruncatedReadError,
    ContentOutOfMemoryError,
    OutputUnavailableError,
)


@pytest.mark.parametrize("error, kind, builtin", [
    (UnsupportedExtensionError("exe"), ErrorKind.UNSUPPORTED_EXTENSION, ValueError),
    (DirectoryUnreadableError("no access", Path("/x")), ErrorKind.DIRECTORY_UNREADABLE, OSError),
    (TruncatedReadError("short read", Path("/x/a.txt")), ErrorKind.TRUNCATED_READ, OSError),
    (ContentOutOfMemoryError("too big", Path("/x/a.txt")), ErrorKind.OUT_OF_MEMORY, MemoryError),
    (OutputUnavailableError("cannot open", Path("/out")), ErrorKind.OUTPUT_UNAVAILABLE, OSError),
])
def test_error_kinds(error, kind, builtin):
    """
    Every harvest error exposes its kind and can still be caught as the matching builtin.
    """
    assert isinstance(error, HarvestError)
    assert isinstance(error, builtin)
    assert error.kind == kind
    assert str(error).startswith(f"[{kind.value}]")


def test_error_keeps_path():
    error = DirectoryUnreadableError("no access", Path("/srv/private"))
    assert error.path == Path("/srv/private")
    assert error.message == "no access"


def test_unsupported_extension_names_the_token():
    error = UnsupportedExtensionError("exe")
    assert error.extension == "exe"
    assert "'exe'" in str(error)
