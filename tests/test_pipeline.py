import logging
from pathlib import Path

import pytest

from tag_cloud_generator.pipeline import (
    InputUnreadableError,
    OutputUnwritableError,
    generate_tag_cloud,
    read_frequencies,
)
from tag_cloud_generator.config import TagCloudConfig


def test_generate_tag_cloud_end_to_end(tmp_path: Path):
    source = tmp_path / "pets.txt"
    source.write_text("cat dog cat\nbird dog cat\n", encoding="utf-8")
    target = tmp_path / "cloud.html"

    selection = generate_tag_cloud(source, target, 2)

    assert [(e.word, e.count) for e in selection.entries] == [("cat", 3), ("dog", 2)]
    html = target.read_text(encoding="utf-8")
    assert 'class="f48" title="count: 3">cat</span>' in html
    assert 'class="f11" title="count: 2">dog</span>' in html
    assert html.index(">cat<") < html.index(">dog<")
    assert f"Top 2 words in {source}" in html


def test_generate_tag_cloud_clamps_requested_count(tmp_path: Path):
    source = tmp_path / "short.txt"
    source.write_text("one two two", encoding="utf-8")
    target = tmp_path / "cloud.html"

    selection = generate_tag_cloud(source, target, 50)

    assert len(selection) == 2
    assert "Top 2 words" in target.read_text(encoding="utf-8")


def test_generate_tag_cloud_negative_count_yields_empty_cloud(tmp_path: Path):
    source = tmp_path / "short.txt"
    source.write_text("one two", encoding="utf-8")
    target = tmp_path / "cloud.html"

    selection = generate_tag_cloud(source, target, -3)

    assert len(selection) == 0
    assert "<span" not in target.read_text(encoding="utf-8")


def test_missing_input_writes_no_output(tmp_path: Path):
    target = tmp_path / "cloud.html"
    with pytest.raises(InputUnreadableError):
        generate_tag_cloud(tmp_path / "missing.txt", target, 5)
    assert not target.exists()


def test_undecodable_input_is_unreadable(tmp_path: Path):
    source = tmp_path / "binary.txt"
    source.write_bytes(b"\xff\xfe\xfa broken")
    with pytest.raises(InputUnreadableError):
        read_frequencies(source, TagCloudConfig())


def test_unwritable_output_raises(tmp_path: Path):
    source = tmp_path / "words.txt"
    source.write_text("alpha beta", encoding="utf-8")
    target = tmp_path / "no-such-dir" / "cloud.html"
    with pytest.raises(OutputUnwritableError) as excinfo:
        generate_tag_cloud(source, target, 1)
    assert excinfo.value.path == target


class _FlushFailsHandle:
    def __init__(self, handle) -> None:
        self._handle = handle

    def write(self, text: str) -> int:
        return self._handle.write(text)

    def flush(self) -> None:
        raise OSError(28, "No space left on device")

    def close(self) -> None:
        self._handle.close()


class _CloseFailsHandle(_FlushFailsHandle):
    def flush(self) -> None:
        self._handle.flush()

    def close(self) -> None:
        self._handle.close()
        raise OSError(5, "Input/output error")


def _wrap_output_handles(monkeypatch: pytest.MonkeyPatch, wrapper: type) -> None:
    real_open = Path.open

    def fake_open(self: Path, mode: str = "r", *args, **kwargs):
        handle = real_open(self, mode, *args, **kwargs)
        return wrapper(handle) if "w" in mode else handle

    monkeypatch.setattr(Path, "open", fake_open)


@pytest.mark.skipif(not Path("/dev/full").exists(), reason="requires /dev/full")
def test_full_device_is_reported_as_unwritable(tmp_path: Path):
    source = tmp_path / "words.txt"
    source.write_text("alpha beta beta", encoding="utf-8")
    with pytest.raises(OutputUnwritableError):
        generate_tag_cloud(source, Path("/dev/full"), 2)
    assert Path("/dev/full").exists()


def test_failed_flush_removes_partial_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    source = tmp_path / "words.txt"
    source.write_text("alpha beta beta", encoding="utf-8")
    target = tmp_path / "cloud.html"
    _wrap_output_handles(monkeypatch, _FlushFailsHandle)

    with pytest.raises(OutputUnwritableError):
        generate_tag_cloud(source, target, 2)
    assert not target.exists()


def test_close_failure_after_flush_keeps_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
    source = tmp_path / "words.txt"
    source.write_text("alpha beta beta", encoding="utf-8")
    target = tmp_path / "cloud.html"
    _wrap_output_handles(monkeypatch, _CloseFailsHandle)

    with caplog.at_level(logging.WARNING, logger="tag_cloud_generator.pipeline"):
        selection = generate_tag_cloud(source, target, 2)

    assert len(selection) == 2
    html = target.read_text(encoding="utf-8")
    assert html.rstrip().endswith("</p></div></body></html>")
    assert 'title="count: 2">beta</span>' in html
    assert any("Cannot close stream" in record.message for record in caplog.records)
