"""Attachments and embedded files of a message."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Callable

from mailforge.encoding import ContentType, Encoding
from mailforge.header import Header

VERSION = "0.4.1"

FileOption = Callable[["File"], None]


def _canonical_key(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


@dataclass
class File:
    """An attachment or embedded file."""

    name: str = ""
    content_type: ContentType | str = ""
    desc: str = ""
    enc: Encoding | None = None
    header: dict[str, list[str]] = field(default_factory=dict)
    writer: Callable[[BinaryIO], int] | None = None

    def set_header(self, header: Header | str, value: str) -> None:
        """Set a header field, replacing any previous values."""
        self.header[_canonical_key(str(header))] = [value]

    def get_header(self, header: Header | str) -> str | None:
        """Return the first value of a header field, or None if it is unset or empty."""
        values = self.header.get(_canonical_key(str(header)))
        if not values or not values[0]:
            return None
        return values[0]


def with_file_name(name: str) -> FileOption:
    """Set the file name."""

    def apply(f: File) -> None:
        f.name = name

    return apply


def with_file_description(description: str) -> FileOption:
    """Set the description written as Content-Description."""

    def apply(f: File) -> None:
        f.desc = description

    return apply


def with_file_encoding(encoding: Encoding) -> FileOption:
    """Set the file's encoding; quoted-printable is ignored for files."""

    def apply(f: File) -> None:
        if encoding == Encoding.QP:
            return
        f.enc = encoding

    return apply


def with_file_content_type(content_type: ContentType | str) -> FileOption:
    """Force the file's content type."""

    def apply(f: File) -> None:
        f.content_type = content_type

    return apply