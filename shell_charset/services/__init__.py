"""Unified service layer public exports."""

from .charset import (  # noqa: F401
    Charset,
    CharsetError,
    CharsetService,
    DecodeMismatch,
    NoMatch,
    parse_charset,
)

__all__ = [
    'Charset',
    'CharsetError',
    'CharsetService',
    'DecodeMismatch',
    'NoMatch',
    'parse_charset',
]
