# mailforge

Building blocks for working with e-mail over SMTP:

- `mailforge.client`: `Client` holds the settings for one SMTP server. You
  configure it with option functions such as `with_port`, `with_timeout`,
  `with_helo`, `with_ssl`, `with_ssl_port`, `with_tls_policy`,
  `with_tls_port_policy`, `with_tls_config`, `with_smtp_auth`,
  `with_smtp_auth_custom`, `with_username`, `with_password`, `with_dsn`,
  `with_dsn_mail_return_type`, `with_dsn_rcpt_notify_type`, `without_noop`,
  `with_debug_log`, `with_logger` and `with_dial_func`. An invalid setting
  raises a specific exception, for example `InvalidPortError`,
  `InvalidTimeoutError`, `InvalidHeloError`, `InvalidTLSConfigError`,
  `NoHostnameError` or one of the `InvalidDSN...Error` classes. All of them
  derive from `ClientError` and `ValueError`.
- `mailforge.encoding`: `Charset`, `Encoding`, `ContentType`, `MIMEType` and
  `MIMEVersion`, all string enums.
- `mailforge.header`: `Header`, `AddrHeader` and `Importance`.
  `Importance.num_string()` and `Importance.xprio_string()` return the values
  used in the `Priority` and `X-Priority` headers.
- `mailforge.auth`: `SMTPAuthType` (PLAIN, LOGIN, CRAM-MD5, XOAUTH2 or none)
  and `AuthNotSupportedError`.
- `mailforge.file`: `File`, which describes an attachment or an embedded file,
  and the options `with_file_name`, `with_file_description`,
  `with_file_encoding` and `with_file_content_type`. `with_file_encoding`
  ignores quoted-printable.
- `mailforge.b64linebreaker`: `Base64LineBreaker` wraps a Base64 stream into
  CRLF-terminated lines of 76 bytes.
- `mailforge.debuglog`, `mailforge.stdlog`, `mailforge.jsonlog`: `Log` records
  carry a `Direction` (client to server or server to client). The `Logger`
  protocol takes these records. `StdLogger` writes them as timestamped text
  lines and `JsonLogger` writes them as JSON lines. Both filter by `Level`.

## Installation

```
pip install mailforge
```

## Configuring a client

```python
from mailforge.client import (
    Client,
    InvalidPortError,
    TLSPolicy,
    with_helo,
    with_password,
    with_port,
    with_username,
)

password = "password"
client = Client(
    "mail.example.com",
    with_port(587),
    with_helo("client.example.com"),
    with_username("user@example.com"),
    with_password(password),
)
print(client.server_addr())  # mail.example.com:587

# Implicit TLS on port 465, with a plaintext fallback on port 25.
client.set_ssl_port(True, True)
print(client.server_addr())           # mail.example.com:465
print(client.server_fallback_addr())  # mail.example.com:25

# Opportunistic STARTTLS uses port 587 and falls back to 25.
client.set_tls_port_policy(TLSPolicy.OPPORTUNISTIC)
print(client.tls_policy_name)         # TLSOpportunistic

try:
    Client("mail.example.com", with_port(100000))
except InvalidPortError as err:
    print(err)  # invalid port number
```

A `Client` needs a host name. An empty host name raises `NoHostnameError`. The
default HELO name is the local host name.

## Wrapping Base64 output

```python
import base64
import io

from mailforge.b64linebreaker import Base64LineBreaker

out = io.BytesIO()
with Base64LineBreaker(out) as breaker:
    breaker.write(base64.b64encode(b"some attachment payload" * 20))
print(out.getvalue().decode())
```

If no output is set, `write` raises `NoOutWriterError`.

## Logging the SMTP conversation

```python
import sys

from mailforge.debuglog import Direction, Level, Log
from mailforge.stdlog import StdLogger

logger = StdLogger(sys.stderr, Level.DEBUG)
logger.debugf(Log(Direction.CLIENT_TO_SERVER, "EHLO %s", ("client.example.com",)))
# 2024/01/01 12:00:00 DEBUG: C --> S: EHLO client.example.com
```

`JsonLogger` takes the same arguments. Each record it writes holds `time`,
`level`, `msg` and a `direction` object with `from` and `to`.

## What this package does not do

`Client` only holds and validates configuration. It does not open
connections, speak SMTP, start TLS, authenticate or send messages. The dial
function and authenticator you pass to it are stored but never called. The
package also has no message type for composing mail. `File` describes an
attachment, but nothing here renders it into a MIME message.

## Running the tests

```
pip install -e ".[test]"
pytest
```