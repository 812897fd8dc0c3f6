"""SMTP AUTH mechanisms and the error raised when a server lacks one."""

from __future__ import annotations

from enum import StrEnum


class SMTPAuthType(StrEnum):
    """SASL mechanism used for SMTP AUTH."""

    CRAM_MD5 = "CRAM-MD5"
    LOGIN = "LOGIN"
    # Performing no authentication at all; prefer not configuring auth instead.
    NO_AUTH = ""
    PLAIN = "PLAIN"
    XOAUTH2 = "XOAUTH2"


class AuthNotSupportedError(Exception):
    """The server does not offer the requested SMTP AUTH mechanism."""

    def __init__(self, auth_type: SMTPAuthType | str) -> None:
        self.auth_type = auth_type
        super().__init__(f"server does not support SMTP AUTH type: {auth_type}")