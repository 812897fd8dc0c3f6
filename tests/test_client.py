import io
import ssl
from datetime import timedelta

import pytest

from mailforge.auth import SMTPAuthType
from mailforge.client import (
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    Client,
    ClientError,
    DSNMailReturnOption,
    DSNRcptNotifyOption,
    InvalidDSNMailReturnOptionError,
    InvalidDSNRcptNotifyCombinationError,
    InvalidDSNRcptNotifyOptionError,
    InvalidHeloError,
    InvalidPortError,
    InvalidTimeoutError,
    InvalidTLSConfigError,
    NoHostnameError,
    TLSPolicy,
    with_debug_log,
    with_dial_func,
    with_dsn,
    with_dsn_mail_return_type,
    with_dsn_rcpt_notify_type,
    with_helo,
    with_logger,
    with_password,
    with_port,
    with_smtp_auth,
    with_smtp_auth_custom,
    with_ssl,
    with_ssl_port,
    with_timeout,
    with_tls_config,
    with_tls_policy,
    with_tls_port_policy,
    with_username,
    without_noop,
)
from mailforge.debuglog import Level
from mailforge.stdlog import StdLogger

HOST = "localhost"


def test_new_client_defaults():
    c = Client("mail.example.com")
    assert c.host == "mail.example.com"
    assert c.timeout == DEFAULT_TIMEOUT == 15.0
    assert c.port == DEFAULT_PORT == 25
    assert c.tls_policy == TLSPolicy.MANDATORY
    assert c.tls_server_name == "mail.example.com"
    assert c.tls_config.minimum_version == ssl.TLSVersion.TLSv1_2
    assert c.server_addr() == "mail.example.com:25"
    assert c.helo


def test_new_client_empty_host_fails():
    with pytest.raises(NoHostnameError):
        Client("")


def test_none_options_are_ignored():
    c = Client(HOST, None, with_port(465), None)
    assert c.port == 465


@pytest.mark.parametrize(
    "option, error",
    [
        (with_port(100000), InvalidPortError),
        (with_timeout(-10), InvalidTimeoutError),
        (with_helo(""), InvalidHeloError),
        (with_tls_config(None), InvalidTLSConfigError),
        (with_dsn_mail_return_type("FAIL"), InvalidDSNMailReturnOptionError),
        (with_dsn_rcpt_notify_type("FAIL"), InvalidDSNRcptNotifyOptionError),
        (
            with_dsn_rcpt_notify_type(DSNRcptNotifyOption.SUCCESS, DSNRcptNotifyOption.NEVER),
            InvalidDSNRcptNotifyCombinationError,
        ),
    ],
)
def test_failing_options(option, error):
    with pytest.raises(error):
        Client(HOST, option)


def test_option_errors_are_client_errors():
    with pytest.raises(ClientError):
        Client(HOST, with_port(0))


def test_misc_options():
    password = "password"
    logger = StdLogger(io.StringIO(), Level.DEBUG)
    auth = object()

    def dial(network, address):
        return None

    c = Client(
        HOST,
        with_ssl(),
        with_debug_log(),
        with_logger(logger),
        with_smtp_auth(SMTPAuthType.LOGIN),
        with_smtp_auth_custom(auth),
        with_username("user"),
        with_password(password),
        with_dial_func(dial),
        with_tls_config(ssl.create_default_context()),
    )
    assert c.use_ssl is True
    assert c.use_debug_log is True
    assert c.logger is logger
    assert c.smtp_auth_type == "LOGIN"
    assert c.smtp_auth is auth
    assert c.username == "user"
    assert c.password == password
    assert c.dial_func is dial


def test_with_helo():
    c = Client(HOST, with_helo("test.de"))
    assert c.helo == "test.de"


@pytest.mark.parametrize("value", [25, 465])
def test_with_port(value):
    assert Client(HOST, with_port(value)).port == value


@pytest.mark.parametrize("value", [100000, -10])
def test_with_port_invalid(value):
    with pytest.raises(InvalidPortError):
        Client(HOST, with_port(value))


@pytest.mark.parametrize(
    "value, want",
    [(5, 5.0), (30, 30.0), (timedelta(minutes=1), 60.0)],
)
def test_with_timeout(value, want):
    assert Client(HOST, with_timeout(value)).timeout == want


def test_with_timeout_zero():
    with pytest.raises(InvalidTimeoutError):
        Client(HOST, with_timeout(0))


@pytest.mark.parametrize(
    "policy, want",
    [
        (TLSPolicy.MANDATORY, "TLSMandatory"),
        (TLSPolicy.OPPORTUNISTIC, "TLSOpportunistic"),
        (TLSPolicy.NO_TLS, "NoTLS"),
        (-1, "UnknownPolicy"),
    ],
)
def test_with_tls_policy(policy, want):
    c = Client(HOST, with_tls_policy(policy))
    assert c.tls_policy_name == want
    assert c.port == 25


@pytest.mark.parametrize(
    "policy, want, port, fb_port",
    [
        (TLSPolicy.MANDATORY, "TLSMandatory", 587, 0),
        (TLSPolicy.OPPORTUNISTIC, "TLSOpportunistic", 587, 25),
        (TLSPolicy.NO_TLS, "NoTLS", 25, 0),
        (-1, "UnknownPolicy", 587, 0),
    ],
)
def test_with_tls_port_policy(policy, want, port, fb_port):
    c = Client(HOST, with_tls_port_policy(policy))
    assert c.tls_policy_name == want
    assert c.port == port
    assert c.fallback_port == fb_port
    assert c.server_fallback_addr() == f"{HOST}:{fb_port}"


@pytest.mark.parametrize(
    "policy, want",
    [
        (TLSPolicy.MANDATORY, "TLSMandatory"),
        (TLSPolicy.OPPORTUNISTIC, "TLSOpportunistic"),
        (TLSPolicy.NO_TLS, "NoTLS"),
        (-1, "UnknownPolicy"),
    ],
)
def test_set_tls_policy(policy, want):
    c = Client(HOST, with_tls_policy(TLSPolicy.NO_TLS))
    c.tls_policy = policy
    assert c.tls_policy_name == want


def test_example_set_tls_policy():
    c = Client("mail.example.com")
    c.tls_policy = TLSPolicy.MANDATORY
    assert c.tls_policy_name == "TLSMandatory"


def test_set_tls_config():
    c = Client(HOST)
    context = ssl.create_default_context()
    c.set_tls_config(context)
    assert c.tls_config is context
    with pytest.raises(InvalidTLSConfigError):
        c.set_tls_config(None)
    assert c.tls_config is context


@pytest.mark.parametrize(
    "use_ssl, fb, port, fb_port",
    [
        (True, False, 465, 0),
        (True, True, 465, 25),
        (False, False, 25, 0),
        (False, True, 25, 25),
    ],
)
def test_set_ssl_port(use_ssl, fb, port, fb_port):
    c = Client(HOST)
    c.set_ssl_port(use_ssl, fb)
    assert c.use_ssl is use_ssl
    assert c.port == port
    assert c.fallback_port == fb_port


@pytest.mark.parametrize("fb, fb_port", [(False, 0), (True, 25)])
def test_with_ssl_port(fb, fb_port):
    c = Client(HOST, with_ssl_port(fb))
    assert c.use_ssl is True
    assert c.port == 465
    assert c.fallback_port == fb_port


def test_with_dsn():
    c = Client(HOST, with_dsn())
    assert c.dsn is True
    assert c.dsn_mail_return == DSNMailReturnOption.FULL
    assert c.dsn_rcpt_notify == ["FAILURE", "SUCCESS"]


@pytest.mark.parametrize(
    "value, want",
    [(DSNMailReturnOption.FULL, "FULL"), (DSNMailReturnOption.HEADERS_ONLY, "HDRS")],
)
def test_with_dsn_mail_return_type(value, want):
    c = Client(HOST, with_dsn_mail_return_type(value))
    assert c.dsn is True
    assert c.dsn_mail_return == want


def test_with_dsn_mail_return_type_invalid():
    with pytest.raises(InvalidDSNMailReturnOptionError):
        Client(HOST, with_dsn_mail_return_type("INVALID"))


@pytest.mark.parametrize(
    "value, want",
    [
        (DSNRcptNotifyOption.NEVER, "NEVER"),
        (DSNRcptNotifyOption.SUCCESS, "SUCCESS"),
        (DSNRcptNotifyOption.FAILURE, "FAILURE"),
        (DSNRcptNotifyOption.DELAY, "DELAY"),
    ],
)
def test_with_dsn_rcpt_notify_type(value, want):
    c = Client(HOST, with_dsn_rcpt_notify_type(value))
    assert c.dsn is True
    assert c.dsn_rcpt_notify[0] == want


def test_with_dsn_rcpt_notify_type_invalid():
    with pytest.raises(InvalidDSNRcptNotifyOptionError):
        Client(HOST, with_dsn_rcpt_notify_type("INVALID"))


def test_with_dsn_rcpt_notify_multiple_keeps_order():
    c = Client(
        HOST,
        with_dsn_rcpt_notify_type(DSNRcptNotifyOption.DELAY, DSNRcptNotifyOption.FAILURE),
    )
    assert c.dsn_rcpt_notify == ["DELAY", "FAILURE"]


def test_without_noop():
    assert Client(HOST, without_noop()).no_noop is True
    assert Client(HOST).no_noop is False


def test_options_applied_in_order():
    c = Client(HOST, with_port(2525), with_tls_port_policy(TLSPolicy.NO_TLS))
    assert c.port == 25
    c = Client(HOST, with_tls_port_policy(TLSPolicy.NO_TLS), with_port(2525))
    assert c.port == 2525
    assert c.server_addr() == "localhost:2525"