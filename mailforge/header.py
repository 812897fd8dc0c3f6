"""Mail header field names and message importance levels."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Header(StrEnum):
    """Generic mail header field names."""

    CONTENT_DESCRIPTION = "Content-Description"
    CONTENT_DISPOSITION = "Content-Disposition"
    CONTENT_ID = "Content-ID"
    CONTENT_LANG = "Content-Language"
    CONTENT_LOCATION = "Content-Location"
    CONTENT_TRANSFER_ENC = "Content-Transfer-Encoding"
    CONTENT_TYPE = "Content-Type"
    DATE = "Date"
    DISPOSITION_NOTIFICATION_TO = "Disposition-Notification-To"
    IMPORTANCE = "Importance"
    IN_REPLY_TO = "In-Reply-To"
    LIST_UNSUBSCRIBE = "List-Unsubscribe"
    LIST_UNSUBSCRIBE_POST = "List-Unsubscribe-Post"
    MESSAGE_ID = "Message-ID"
    MIME_VERSION = "MIME-Version"
    ORGANIZATION = "Organization"
    PRECEDENCE = "Precedence"
    PRIORITY = "Priority"
    REPLY_TO = "Reply-To"
    SUBJECT = "Subject"
    USER_AGENT = "User-Agent"
    X_AUTO_RESPONSE_SUPPRESS = "X-Auto-Response-Suppress"
    X_MAILER = "X-Mailer"
    X_MSMAIL_PRIORITY = "X-MSMail-Priority"
    X_PRIORITY = "X-Priority"


class AddrHeader(StrEnum):
    """Address-carrying mail header field names."""

    BCC = "Bcc"
    CC = "Cc"
    # Used only for the SMTP envelope, never written into the message.
    ENVELOPE_FROM = "EnvelopeFrom"
    FROM = "From"
    TO = "To"


class Importance(IntEnum):
    """Importance or priority of a message."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    NON_URGENT = 3
    URGENT = 4

    def num_string(self) -> str:
        """Return the value for the Priority header, or an empty string."""
        if self in (Importance.LOW, Importance.NON_URGENT):
            return "0"
        if self in (Importance.HIGH, Importance.URGENT):
            return "1"
        return ""

    def xprio_string(self) -> str:
        """Return the value for the X-Priority header, or an empty string."""
        if self in (Importance.LOW, Importance.NON_URGENT):
            return "5"
        if self in (Importance.HIGH, Importance.URGENT):
            return "1"
        return ""

    def __str__(self) -> str:
        return _IMPORTANCE_NAMES.get(self, "")


_IMPORTANCE_NAMES = {
    Importance.NON_URGENT: "non-urgent",
    Importance.LOW: "low",
    Importance.HIGH: "high",
    Importance.URGENT: "urgent",
}