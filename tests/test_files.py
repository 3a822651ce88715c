import pytest

from primer.files import (
    SAMPLE_TEXT,
    copy_file,
    count_characters,
    read_text,
    write_sample,
)


def test_write_then_read_sample(tmp_path):
    target = tmp_path / "output.txt"
    write_sample(target)
    assert read_text(target) == "Hello, this is a test file."


def test_write_sample_replaces_content(tmp_path):
    target = tmp_path / "output.txt"
    target.write_text("old content that is much longer than the sample text")
    write_sample(target)
    assert read_text(target) == SAMPLE_TEXT


def test_count_characters_of_sample(tmp_path):
    target = tmp_path / "output.txt"
    write_sample(target)
    assert count_characters(target) == len(SAMPLE_TEXT)


def test_count_characters_keeps_line_endings(tmp_path):
    target = tmp_path / "lines.txt"
    target.write_bytes(b"ab\r\ncd\n")
    assert count_characters(target) == 7
    assert read_text(target) == "ab\r\ncd\n"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "absent.txt")


def test_count_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_characters(tmp_path / "absent.txt")


def test_copy_file_round_trip(tmp_path):
    source = tmp_path / "output.txt"
    destination = tmp_path / "copy.txt"
    write_sample(source)
    result = copy_file(source, destination)
    assert result == destination
    assert read_text(destination) == read_text(source)


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "absent.txt", tmp_path / "copy.txt")


def test_default_paths_use_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_sample()
    copy_file()
    assert (tmp_path / "copy.txt").read_text() == SAMPLE_TEXT
    assert count_characters() == len(SAMPLE_TEXT)