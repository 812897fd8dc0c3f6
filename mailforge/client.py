"""SMTP client configuration: server address, ports, TLS, auth and DSN settings."""

from __future__ import annotations

import socket
import ssl
from datetime import timedelta
from enum import IntEnum, StrEnum
from typing import Any, Callable

from mailforge.auth import SMTPAuthType
from mailforge.debuglog import Logger

DEFAULT_PORT = 25
DEFAULT_PORT_SSL = 465
DEFAULT_PORT_TLS = 587
DEFAULT_TIMEOUT = 15.0
DEFAULT_TLS_MIN_VERSION = ssl.TLSVersion.TLSv1_2


class TLSPolicy(IntEnum):
    """How STARTTLS is used on a plain connection."""

    MANDATORY = 0
    OPPORTUNISTIC = 1
    NO_TLS = 2

    def __str__(self) -> str:
        return _POLICY_NAMES[self]


_POLICY_NAMES = {
    TLSPolicy.MANDATORY: "TLSMandatory",
    TLSPolicy.OPPORTUNISTIC: "TLSOpportunistic",
    TLSPolicy.NO_TLS: "NoTLS",
}

DEFAULT_TLS_POLICY = TLSPolicy.MANDATORY


class DSNMailReturnOption(StrEnum):
    """MAIL FROM RET option used when a delivery status notification is requested."""

    HEADERS_ONLY = "HDRS"
    FULL = "FULL"


class DSNRcptNotifyOption(StrEnum):
    """RCPT TO NOTIFY option used when a delivery status notification is requested."""

    NEVER = "NEVER"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    DELAY = "DELAY"


class ClientError(Exception):
    """Base class for client configuration errors."""


class InvalidPortError(ClientError, ValueError):
    """The port number is outside 1..65535."""

    def __init__(self) -> None:
        super().__init__("invalid port number")


class InvalidTimeoutError(ClientError, ValueError):
    """The timeout is zero or negative."""

    def __init__(self) -> None:
        super().__init__("timeout cannot be zero or negative")


class InvalidHeloError(ClientError, ValueError):
    """The HELO/EHLO value is empty."""

    def __init__(self) -> None:
        super().__init__("invalid HELO/EHLO value - must not be empty")


class InvalidTLSConfigError(ClientError, ValueError):
    """No TLS configuration was given."""

    def __init__(self) -> None:
        super().__init__("invalid TLS config")


class NoHostnameError(ClientError, ValueError):
    """The client has no server hostname."""

    def __init__(self) -> None:
        super().__init__("hostname for client cannot be empty")


class InvalidDSNMailReturnOptionError(ClientError, ValueError):
    """The DSN mail return option is neither HDRS nor FULL."""

    def __init__(self) -> None:
        super().__init__("DSN mail return option can only be HDRS or FULL")


class InvalidDSNRcptNotifyOptionError(ClientError, ValueError):
    """A DSN recipient notify option is not recognised."""

    def __init__(self) -> None:
        super().__init__(
            "DSN rcpt notify option can only be: NEVER, SUCCESS, FAILURE or DELAY"
        )


class InvalidDSNRcptNotifyCombinationError(ClientError, ValueError):
    """NEVER was combined with another DSN recipient notify option."""

    def __init__(self) -> None:
        super().__init__(
            "DSN rcpt notify option NEVER cannot be combined with any of "
            "SUCCESS, FAILURE or DELAY"
        )


DialFunc = Callable[[str, str], Any]
Option = Callable[["Client"], None]


def _default_tls_config() -> ssl.SSLContext:
    context = ssl.create_default_context()
    context.minimum_version = DEFAULT_TLS_MIN_VERSION
    return context


class Client:
    """Settings for talking to one SMTP server."""

    def __init__(self, host: str, *args: Option | None) -> None:
        self.host = host
        self.port = DEFAULT_PORT
        self.fallback_port = 0
        self.timeout = DEFAULT_TIMEOUT
        self.tls_config: ssl.SSLContext = _default_tls_config()
        self.tls_server_name = host
        self.tls_policy: TLSPolicy | int = DEFAULT_TLS_POLICY
        self.use_ssl = False
        self.dsn = False
        self.dsn_mail_return: DSNMailReturnOption | None = None
        self.dsn_rcpt_notify: list[str] = []
        self.no_noop = False
        self.username = ""
        self.password = ""
        self.smtp_auth: Any = None
        self.smtp_auth_type: SMTPAuthType | str = SMTPAuthType.NO_AUTH
        self.use_debug_log = False
        self.logger: Logger | None = None
        self.dial_func: DialFunc | None = None

        try:
            self.helo = socket.gethostname()
        except OSError as exc:
            raise ClientError(f"failed to read local hostname: {exc}") from exc

        for option in args:
            if option is not None:
                option(self)

        if not self.host:
            raise NoHostnameError()

    @property
    def tls_policy_name(self) -> str:
        """The current TLS policy as text, or "UnknownPolicy"."""
        if self.tls_policy in _POLICY_NAMES:
            return str(TLSPolicy(self.tls_policy))
        return "UnknownPolicy"

    def server_addr(self) -> str:
        """Return "host:port" of the server."""
        return f"{self.host}:{self.port}"

    def server_fallback_addr(self) -> str:
        """Return "host:fallback_port" of the server."""
        return f"{self.host}:{self.fallback_port}"

    def set_tls_port_policy(self, policy: TLSPolicy | int) -> None:
        """Set the TLS policy and the port that goes with it.

        Port 587 is used for mandatory and opportunistic TLS, the latter with a
        plaintext fallback on port 25; NO_TLS uses port 25.
        """
        self.port = DEFAULT_PORT_TLS
        if policy == TLSPolicy.OPPORTUNISTIC:
            self.fallback_port = DEFAULT_PORT
        if policy == TLSPolicy.NO_TLS:
            self.port = DEFAULT_PORT
        self.tls_policy = policy

    def set_ssl_port(self, ssl: bool, fallback: bool) -> None:
        """Turn implicit SSL on or off, setting port 465 or 25 and an optional fallback to 25."""
        self.port = DEFAULT_PORT_SSL if ssl else DEFAULT_PORT
        self.fallback_port = DEFAULT_PORT if fallback else 0
        self.use_ssl = ssl

    def set_tls_config(self, tls_config: ssl.SSLContext | None) -> None:
        """Replace the TLS configuration; None is rejected."""
        if tls_config is None:
            raise InvalidTLSConfigError()
        self.tls_config = tls_config


def with_port(port: int) -> Option:
    """Use the given server port."""

    def apply(c: Client) -> None:
        if port < 1 or port > 65535:
            raise InvalidPortError()
        c.port = port

    return apply


def with_timeout(timeout: float | timedelta) -> Option:
    """Use the given connection timeout, in seconds or as a timedelta."""

    def apply(c: Client) -> None:
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        if seconds <= 0:
            raise InvalidTimeoutError()
        c.timeout = seconds

    return apply


def with_ssl() -> Option:
    """Use an implicit SSL/TLS connection without changing the port."""

    def apply(c: Client) -> None:
        c.use_ssl = True

    return apply


def with_ssl_port(fallback: bool) -> Option:
    """Use implicit SSL on port 465, optionally falling back to plaintext on 25."""

    def apply(c: Client) -> None:
        c.set_ssl_port(True, fallback)

    return apply


def with_debug_log() -> Option:
    """Log the SMTP conversation."""

    def apply(c: Client) -> None:
        c.use_debug_log = True

    return apply


def with_logger(logger: Logger) -> Option:
    """Use the given logger for debug output."""

    def apply(c: Client) -> None:
        c.logger = logger

    return apply


def with_helo(helo: str) -> Option:
    """Use the given HELO/EHLO host name."""

    def apply(c: Client) -> None:
        if not helo:
            raise InvalidHeloError()
        c.helo = helo

    return apply


def with_tls_policy(policy: TLSPolicy | int) -> Option:
    """Use the given TLS policy without changing the port."""

    def apply(c: Client) -> None:
        c.tls_policy = policy

    return apply


def with_tls_port_policy(policy: TLSPolicy | int) -> Option:
    """Use the given TLS policy and the port that goes with it."""

    def apply(c: Client) -> None:
        c.set_tls_port_policy(policy)

    return apply


def with_tls_config(tls_config: ssl.SSLContext | None) -> Option:
    """Use the given TLS configuration."""

    def apply(c: Client) -> None:
        if tls_config is None:
            raise InvalidTLSConfigError()
        c.tls_config = tls_config

    return apply


def with_smtp_auth(auth_type: SMTPAuthType | str) -> Option:
    """Authenticate with the given SMTP AUTH mechanism."""

    def apply(c: Client) -> None:
        c.smtp_auth_type = auth_type

    return apply


def with_smtp_auth_custom(smtp_auth: Any) -> Option:
    """Authenticate with the given custom authenticator."""

    def apply(c: Client) -> None:
        c.smtp_auth = smtp_auth

    return apply


def with_username(username: str) -> Option:
    """Authenticate as the given user."""

    def apply(c: Client) -> None:
        c.username = username

    return apply


def with_password(password: str) -> Option:
    """Authenticate with the given password or secret."""

    def apply(c: Client) -> None:
        c.password = password

    return apply


def with_dsn() -> Option:
    """Request DSNs with full return and notification on failure and success."""

    def apply(c: Client) -> None:
        c.dsn = True
        c.dsn_mail_return = DSNMailReturnOption.FULL
        c.dsn_rcpt_notify = [str(DSNRcptNotifyOption.FAILURE), str(DSNRcptNotifyOption.SUCCESS)]

    return apply


def with_dsn_mail_return_type(option: DSNMailReturnOption | str) -> Option:
    """Request DSNs with the given MAIL FROM return option."""

    def apply(c: Client) -> None:
        try:
            value = DSNMailReturnOption(option)
        except ValueError:
            raise InvalidDSNMailReturnOptionError() from None
        c.dsn = True
        c.dsn_mail_return = value

    return apply


def with_dsn_rcpt_notify_type(*args: DSNRcptNotifyOption | str) -> Option:
    """Request DSNs with the given RCPT TO notify options."""

    def apply(c: Client) -> None:
        options: list[str] = []
        never = other = False
        for opt in args:
            try:
                value = DSNRcptNotifyOption(opt)
            except ValueError:
                raise InvalidDSNRcptNotifyOptionError() from None
            if value is DSNRcptNotifyOption.NEVER:
                never = True
            else:
                other = True
            options.append(str(value))
        if never and other:
            raise InvalidDSNRcptNotifyCombinationError()
        c.dsn = True
        c.dsn_rcpt_notify = options

    return apply


def without_noop() -> Option:
    """Skip the NOOP connection check, for servers that delay non-AUTH replies."""

    def apply(c: Client) -> None:
        c.no_noop = True

    return apply


def with_dial_func(dial_func: DialFunc) -> Option:
    """Use the given function to open the connection to the server."""

    def apply(c: Client) -> None:
        c.dial_func = dial_func

    return apply