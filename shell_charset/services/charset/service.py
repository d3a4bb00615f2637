"""描述文件解码服务

完整流程：头部有损解码 -> 解析编码标签 -> 按识别出的编码重新解码原始字节。
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..utils.encoding import header_text
from .charset import Charset
from .errors import DecodeMismatch, NoMatch
from .parser import parse_charset

logger = logging.getLogger(__name__)


class CharsetService:
    """按描述文件头部的编码标签解码整个字节流"""

    def __init__(
        self,
        header_probe_bytes: int = 64,
        fallback_on_no_match: bool = True,
        fallback_on_mismatch: bool = False,
    ):
        if header_probe_bytes <= 0:
            raise ValueError(f"header_probe_bytes 必须为正整数，当前值: {header_probe_bytes}")
        self.header_probe_bytes = header_probe_bytes
        self.fallback_on_no_match = fallback_on_no_match
        self.fallback_on_mismatch = fallback_on_mismatch

    @classmethod
    def from_settings(cls, settings) -> 'CharsetService':
        return cls(
            header_probe_bytes=settings.CHARSET_HEADER_PROBE_BYTES,
            fallback_on_no_match=settings.CHARSET_FALLBACK_ON_NO_MATCH,
            fallback_on_mismatch=settings.CHARSET_FALLBACK_ON_MISMATCH,
        )

    def sniff(self, data: bytes) -> Tuple[str, Charset]:
        """从头部区域解析编码标签

        Raises:
            NoMatch: 头部没有已知的编码标签
        """
        return parse_charset(header_text(data, self.header_probe_bytes))

    def decode(self, data: bytes):
        """识别编码标签并解码全部字节

        Returns:
            DecodeResult

        Raises:
            NoMatch: 未找到标签且未启用兜底
            DecodeMismatch: 按标签解码失败且未启用兜底
        """
        from shell_charset.models import DecodeResult

        try:
            _, charset = self.sniff(data)
        except NoMatch as e:
            if not self.fallback_on_no_match:
                raise
            logger.info("未找到编码标签，使用平台默认编码")
            return DecodeResult(
                charset=Charset.DEFAULT,
                text=Charset.DEFAULT.decode(data),
                label_found=False,
                fallback_used=True,
                error=str(e),
            )

        try:
            text = charset.decode(data)
        except DecodeMismatch as e:
            if not self.fallback_on_mismatch:
                raise
            logger.warning(f"按 {charset.label} 解码失败，回退到平台默认编码: {e}")
            return DecodeResult(
                charset=Charset.DEFAULT,
                text=Charset.DEFAULT.decode(data),
                label_found=True,
                fallback_used=True,
                error=str(e),
            )

        logger.debug(f"按 {charset.label} 解码成功, 长度 {len(text)}")
        return DecodeResult(charset=charset, text=text)


__all__ = ['CharsetService']
