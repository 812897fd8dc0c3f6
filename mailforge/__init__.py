"""SMTP client configuration, MIME and header vocabulary, attachment descriptions, Base64 line wrapping and protocol loggers."""

__version__ = "0.4.1"