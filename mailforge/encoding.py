"""Charsets, transfer encodings, content types and MIME identifiers."""

from __future__ import annotations

from enum import StrEnum


class Encoding(StrEnum):
    """MIME content transfer encoding."""

    B64 = "base64"
    QP = "quoted-printable"
    NONE = "8bit"


class Charset(StrEnum):
    """Character set of a message part."""

    UTF7 = "UTF-7"
    UTF8 = "UTF-8"
    ASCII = "US-ASCII"
    ISO_8859_1 = "ISO-8859-1"
    ISO_8859_2 = "ISO-8859-2"
    ISO_8859_3 = "ISO-8859-3"
    ISO_8859_4 = "ISO-8859-4"
    ISO_8859_5 = "ISO-8859-5"
    ISO_8859_6 = "ISO-8859-6"
    ISO_8859_7 = "ISO-8859-7"
    ISO_8859_9 = "ISO-8859-9"
    ISO_8859_13 = "ISO-8859-13"
    ISO_8859_14 = "ISO-8859-14"
    ISO_8859_15 = "ISO-8859-15"
    ISO_8859_16 = "ISO-8859-16"
    ISO_2022_JP = "ISO-2022-JP"
    ISO_2022_KR = "ISO-2022-KR"
    WINDOWS_1250 = "windows-1250"
    WINDOWS_1251 = "windows-1251"
    WINDOWS_1252 = "windows-1252"
    WINDOWS_1255 = "windows-1255"
    WINDOWS_1256 = "windows-1256"
    KOI8_R = "KOI8-R"
    KOI8_U = "KOI8-U"
    BIG5 = "Big5"
    GB18030 = "GB18030"
    GB2312 = "GB2312"
    TIS_620 = "TIS-620"
    EUC_KR = "EUC-KR"
    SHIFT_JIS = "Shift_JIS"
    UNKNOWN = "Unknown"
    GBK = "GBK"


class ContentType(StrEnum):
    """Common content types of message parts and attachments."""

    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    APP_OCTET_STREAM = "application/octet-stream"
    PGP_SIGNATURE = "application/pgp-signature"
    PGP_ENCRYPTED = "application/pgp-encrypted"


class MIMEVersion(StrEnum):
    """MIME version of a message."""

    V1_0 = "1.0"


class MIMEType(StrEnum):
    """Multipart subtype."""

    ALTERNATIVE = "alternative"
    MIXED = "mixed"
    RELATED = "related"