"""
File I/O service for reading case files safely.

Handles:
- Encoding detection
- Permission handling
- Size limits
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import chardet

from checker.core.exceptions import ReadError


BOMS = (b'\xef\xbb\xbf', b'\xff\xfe', b'\xfe\xff')


@dataclass
class FileContent:
    """Container for file content with metadata."""
    content: str
    encoding: str
    bom: bool
    size: int
    raw: bytes = field(default=b'', repr=False)

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())


class FileIOService:
    """Service for reading reference and candidate files."""

    def __init__(
        self,
        default_encoding: str = 'utf-8',
        fallback_encoding: str = 'latin-1',
        max_size: Optional[int] = 50 * 1024 * 1024  # 50MB default limit
    ):
        self.default_encoding = default_encoding
        self.fallback_encoding = fallback_encoding
        self.max_size = max_size

    def read_text(self, path: Path | str) -> str:
        """
        Read a file as text.

        Raises:
            ReadError: The path is missing, not a file, too large or
                unreadable.
        """
        return self.read_file(path).content

    def read_file(self, path: Path | str) -> FileContent:
        """
        Read a text file with automatic encoding detection.

        The default encoding is tried strictly first, then the encoding
        detected by chardet, then the fallback encoding.
        """
        raw_content = self.read_bytes(path)
        content, encoding = self._decode(raw_content)
        if encoding != self.default_encoding:
            logging.debug(f"FileIOService - Decoded {path} as {encoding}")

        return self._content(raw_content, content, encoding)

    def read_pair(
        self,
        reference_path: Path | str,
        candidate_path: Path | str
    ) -> tuple[FileContent, FileContent]:
        """
        Read a reference/candidate pair with one shared encoding.

        Both files are decoded with the same codec, so the texts are
        equal exactly when the bytes are equal. If a codec maps
        different bytes to equal text, both files are decoded with the
        fallback encoding instead, which maps every byte to its own
        character.

        Raises:
            ReadError: Either file cannot be read.
        """
        reference_raw = self.read_bytes(reference_path)
        candidate_raw = self.read_bytes(candidate_path)

        reference, candidate, encoding = self._decode_pair(reference_raw, candidate_raw)
        if encoding != self.default_encoding:
            logging.debug(
                f"FileIOService - Decoded {reference_path} and {candidate_path} as {encoding}"
            )

        return (
            self._content(reference_raw, reference, encoding),
            self._content(candidate_raw, candidate, encoding),
        )

    def read_bytes(self, path: Path | str) -> bytes:
        """
        Read the raw bytes of a file.

        Raises:
            ReadError: The path is missing, not a file, too large or
                unreadable.
        """
        path = Path(path)

        if not path.exists():
            raise ReadError(path, "file not found")

        if not path.is_file():
            raise ReadError(path, "not a file")

        try:
            raw_content = path.read_bytes()
        except PermissionError:
            raise ReadError(path, "permission denied")
        except OSError as e:
            raise ReadError(path, f"OS error: {e}")

        size = len(raw_content)
        if self.max_size is not None and size > self.max_size:
            raise ReadError(
                path,
                f"file too large ({size / 1024 / 1024:.2f} MB). "
                f"Max size is {self.max_size / 1024 / 1024:.2f} MB."
            )

        return raw_content

    def _content(self, raw_content: bytes, content: str, encoding: str) -> FileContent:
        return FileContent(
            content=content,
            encoding=encoding,
            bom=raw_content.startswith(BOMS),
            size=len(raw_content),
            raw=raw_content,
        )

    def _candidate_encodings(self, *contents: bytes) -> list[str]:
        """Default encoding first, then whatever chardet detects, without repeats."""
        encodings = [self.default_encoding]
        for raw_content in contents:
            detected = self._detect_encoding(raw_content)
            if detected and detected not in encodings:
                encodings.append(detected)
        return encodings

    def _decode(self, raw_content: bytes) -> tuple[str, str]:
        """Decode raw bytes, returning the text and the encoding used."""
        for encoding in self._candidate_encodings(raw_content):
            try:
                return raw_content.decode(encoding), encoding
            except (UnicodeDecodeError, LookupError):
                continue

        return raw_content.decode(self.fallback_encoding, errors='replace'), self.fallback_encoding

    def _decode_pair(self, left: bytes, right: bytes) -> tuple[str, str, str]:
        """Decode two byte strings with the first encoding that suits both."""
        for encoding in self._candidate_encodings(left, right):
            try:
                left_text = left.decode(encoding)
                right_text = right.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                continue

            if left_text != right_text or left == right:
                return left_text, right_text, encoding
            logging.debug(f"FileIOService - {encoding} hides a byte difference")

        return (
            left.decode(self.fallback_encoding, errors='replace'),
            right.decode(self.fallback_encoding, errors='replace'),
            self.fallback_encoding,
        )

    def _detect_encoding(self, content: bytes) -> Optional[str]:
        """Detect encoding of content."""
        if not content:
            return None

        result = chardet.detect(content)

        if result['confidence'] > 0.7 and result['encoding']:
            encoding = result['encoding'].lower()
            # ASCII content would already have decoded as UTF-8
            if encoding == 'ascii':
                return None
            return encoding

        return None
