"""编码标签解析器"""

from __future__ import annotations

import logging
from typing import Tuple

from .charset import PARSE_ORDER, Charset, labels
from .errors import NoMatch

logger = logging.getLogger(__name__)


def parse_charset(text: str) -> Tuple[str, Charset]:
    """识别 text 开头的编码标签

    按 ASCII, Shift_JIS, ISO-2022-JP, EUC-JP, UTF-8 的顺序做精确前缀匹配，
    区分大小写，不跳过任何前导字符。

    Returns:
        (标签之后未消费的剩余文本, 编码标识)

    Raises:
        NoMatch: 开头不是任何已知标签
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_charset() 需要 str 类型，实际为 {type(text).__name__}")

    for charset in PARSE_ORDER:
        if text.startswith(charset.value):
            return text[len(charset.value):], charset

    logger.debug(f"未匹配到编码标签: {text[:32]!r}")
    raise NoMatch(text, 0, labels())


__all__ = ['parse_charset']
