"""Utility subpackage (low-level decoding helpers)."""

from .encoding import (  # noqa: F401
    canonical_encoding,
    decode_with_bom_sniffing,
    detect_encoding_by_bom,
    header_text,
    safe_decode,
)

__all__ = [
    'canonical_encoding',
    'decode_with_bom_sniffing',
    'detect_encoding_by_bom',
    'header_text',
    'safe_decode',
]
