import pytest

from wordharvest.core.common.errors import OutputUnavailableError
from wordharvest.features.word_sink.data.file_sink import FileWordSink


def test_sink_writes_one_word_per_line(tmp_path):
    out = tmp_path / "words.lst"

    with FileWordSink(out) as sink:
        sink.write(b"zeta")
        sink.write(b"alpha")
        sink.write("café".encode("utf-8"))

    assert out.read_bytes() == "zeta\nalpha\ncafé\n".encode("utf-8")
    assert sink.words_written == 3
    assert sink.closed


def test_sink_truncates_existing_file(tmp_path):
    out = tmp_path / "words.lst"
    out.write_text("stale\n")

    with FileWordSink(out) as sink:
        sink.write(b"fresh")

    assert out.read_text() == "fresh\n"


def test_sink_unavailable_output(tmp_path):
    with pytest.raises(OutputUnavailableError):
        FileWordSink(tmp_path / "missing-dir" / "words.lst").open()


def test_sink_close_is_idempotent(tmp_path):
    sink = FileWordSink(tmp_path / "w.lst").open()
    sink.close()
    sink.close()
    assert sink.closed


def test_write_after_close_fails(tmp_path):
    sink = FileWordSink(tmp_path / "w.lst").open()
    sink.close()
    with pytest.raises(ValueError):
        sink.write(b"late")
