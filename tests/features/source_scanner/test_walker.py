import os
import pytest
from collections import Counter
from pathlib import Path

from wordharvest.core.common.errors import DirectoryUnreadableError
from wordharvest.features.extensions.data.regex_matcher import RegexExtensionMatcher
from wordharvest.features.source_scanner.data.directory_walker import RecursiveDirectoryWalker
from wordharvest.features.source_scanner.service.api import find_matching_files


@pytest.fixture
def nested_tree(make_tree):
    """
    corpus/
      top.txt
      skip.TXT
      skip.txtx
      a/
        one.asc
        b/
          two.text
          c/
            three.txt
            image.png
      empty/
    """
    root = make_tree({
        "top.txt": "top",
        "skip.TXT": "upper",
        "skip.txtx": "longer",
        "a/one.asc": "one",
        "a/b/two.text": "two",
        "a/b/c/three.txt": "three",
        "a/b/c/image.png": b"\x89PNG",
    })
    (root / "empty").mkdir()
    return root


def test_walker_visits_each_matching_file_once(nested_tree, text_extensions):
    visited = []
    walker = RecursiveDirectoryWalker()

    stats = walker.walk(nested_tree, RegexExtensionMatcher(text_extensions), visited.append)

    counts = Counter(visited)
    assert set(counts) == {
        nested_tree / "top.txt",
        nested_tree / "a" / "one.asc",
        nested_tree / "a" / "b" / "two.text",
        nested_tree / "a" / "b" / "c" / "three.txt",
    }
    assert all(n == 1 for n in counts.values())
    assert stats.files_matched == 4
    assert stats.directories_listed == 5
    assert stats.directories_failed == 0


def test_walker_skips_symlinks(make_tree, text_extensions):
    root = make_tree({"real/words.txt": "hello"})
    os.symlink(root / "real" / "words.txt", root / "link.txt")
    # A loop back to the root must not be followed
    os.symlink(root, root / "real" / "loop", target_is_directory=True)

    visited = []
    stats = RecursiveDirectoryWalker().walk(root, RegexExtensionMatcher(text_extensions), visited.append)

    assert visited == [root / "real" / "words.txt"]
    assert stats.entries_skipped == 2


def test_unreadable_subdirectory_is_isolated(make_tree, text_extensions, unreadable_dirs):
    """
    One blocked directory must not stop traversal of its siblings.
    """
    root = make_tree({
        "open1/a.txt": "a",
        "locked/secret.txt": "secret",
        "locked/deeper/more.txt": "more",
        "open2/b.txt": "b",
    })
    unreadable_dirs.add(root / "locked")

    visited = []
    reported = []
    stats = RecursiveDirectoryWalker().walk(
        root, RegexExtensionMatcher(text_extensions), visited.append, reported.append
    )

    assert sorted(visited) == sorted([root / "open1" / "a.txt", root / "open2" / "b.txt"])
    assert len(reported) == 1
    assert isinstance(reported[0], DirectoryUnreadableError)
    assert reported[0].path == root / "locked"
    assert stats.directories_failed == 1


def test_unreadable_subdirectory_without_handler_is_logged(make_tree, text_extensions, unreadable_dirs, caplog):
    root = make_tree({"locked/x.txt": "x", "ok.txt": "ok"})
    unreadable_dirs.add(root / "locked")

    visited = []
    RecursiveDirectoryWalker().walk(root, RegexExtensionMatcher(text_extensions), visited.append)

    assert visited == [root / "ok.txt"]
    assert "DirectoryUnreadable" in caplog.text


def test_unreadable_root_raises_without_handler(tmp_path, text_extensions):
    with pytest.raises(DirectoryUnreadableError):
        RecursiveDirectoryWalker().walk(
            tmp_path / "does-not-exist", RegexExtensionMatcher(text_extensions), lambda p: None
        )


def test_unreadable_root_reported_to_handler(tmp_path, text_extensions):
    reported = []
    stats = RecursiveDirectoryWalker().walk(
        tmp_path / "does-not-exist", RegexExtensionMatcher(text_extensions), lambda p: None, reported.append
    )
    assert len(reported) == 1
    assert stats.directories_listed == 0


def test_find_matching_files(nested_tree, text_extensions):
    found = find_matching_files(str(nested_tree), text_extensions)
    assert len(found) == 4
    assert all(isinstance(p, Path) for p in found)
