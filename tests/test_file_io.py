"""Tests for FileIOService."""

from __future__ import annotations

import pytest

from checker.core.exceptions import ReadError
from checker.services.file_io import FileIOService


class TestReadText:
    """Tests for reading case files."""

    def test_utf8(self, tmp_path):
        path = tmp_path / "data1.out"
        path.write_bytes("héllo\r\nworld".encode("utf-8"))

        content = FileIOService().read_file(path)
        assert content.content == "héllo\r\nworld"
        assert content.encoding == "utf-8"
        assert content.line_count == 2
        assert not content.bom

    def test_empty_file(self, tmp_path):
        path = tmp_path / "data1.out"
        path.write_bytes(b"")
        assert FileIOService().read_text(path) == ""

    def test_non_utf8_bytes(self, tmp_path):
        path = tmp_path / "data1.out"
        path.write_bytes(b"caf\xe9")

        text = FileIOService().read_text(path)
        assert len(text) == 4
        assert text.startswith("caf")

    def test_bom_is_kept(self, tmp_path):
        path = tmp_path / "data1.out"
        path.write_bytes(b"\xef\xbb\xbfabc")

        content = FileIOService().read_file(path)
        assert content.content == "\ufeffabc"
        assert content.bom


class TestReadErrors:
    """Tests for ReadError conditions."""

    def test_missing(self, tmp_path):
        with pytest.raises(ReadError) as exc_info:
            FileIOService().read_text(tmp_path / "data1.out")
        assert exc_info.value.reason == "file not found"
        assert "data1.out" in str(exc_info.value)

    def test_directory(self, tmp_path):
        with pytest.raises(ReadError, match="not a file"):
            FileIOService().read_text(tmp_path)

    def test_too_large(self, tmp_path):
        path = tmp_path / "data1.out"
        path.write_bytes(b"abcd")
        with pytest.raises(ReadError, match="too large"):
            FileIOService(max_size=3).read_text(path)


class TestReadPair:
    """Tests for decoding a reference/candidate pair together."""

    def write(self, tmp_path, reference: bytes, candidate: bytes):
        reference_path = tmp_path / "ref.out"
        candidate_path = tmp_path / "out.out"
        reference_path.write_bytes(reference)
        candidate_path.write_bytes(candidate)
        return reference_path, candidate_path

    def test_shared_encoding(self, tmp_path):
        reference, candidate = FileIOService().read_pair(*self.write(tmp_path, b"abc", b"abd"))
        assert reference.encoding == candidate.encoding == "utf-8"
        assert (reference.content, candidate.content) == ("abc", "abd")
        assert reference.raw == b"abc"

    def test_equal_text_means_equal_bytes(self, tmp_path):
        text = "hello world\n1 2 3\n"
        reference, candidate = FileIOService().read_pair(
            *self.write(tmp_path, text.encode("utf-16"), text.encode("utf-8"))
        )
        assert reference.encoding == candidate.encoding
        assert reference.content != candidate.content

    def test_undecodable_pair_uses_fallback(self, tmp_path):
        reference, candidate = FileIOService().read_pair(
            *self.write(tmp_path, b"caf\xe9", b"caf\xc3\xa9")
        )
        assert reference.content != candidate.content

    def test_missing_candidate(self, tmp_path):
        reference_path, _ = self.write(tmp_path, b"a", b"a")
        with pytest.raises(ReadError) as exc_info:
            FileIOService().read_pair(reference_path, tmp_path / "missing.out")
        assert exc_info.value.path.endswith("missing.out")
