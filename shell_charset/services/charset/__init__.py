"""Charset subpackage: encoding identifier, label parser and decode service."""

from .charset import Charset, PARSE_ORDER, labels  # noqa: F401
from .errors import CharsetError, DecodeMismatch, NoMatch  # noqa: F401
from .parser import parse_charset  # noqa: F401
from .service import CharsetService  # noqa: F401

__all__ = [
    'Charset',
    'PARSE_ORDER',
    'labels',
    'CharsetError',
    'DecodeMismatch',
    'NoMatch',
    'parse_charset',
    'CharsetService',
]
