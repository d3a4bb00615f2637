"""编码标识 `Charset`

`Charset` 是一个封闭枚举，每个成员选择一种解码策略。带标签的五个成员会严格
校验解码结果；`DEFAULT` 没有标签，只作为调用方指定的兜底，按平台编码有损解码。

Example:
    >>> Charset.SHIFT_JIS.decode("あいうえお".encode("cp932"))
    'あいうえお'
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Optional, Union

from ..utils.encoding import canonical_encoding, decode_with_bom_sniffing, safe_decode
from .errors import DecodeMismatch, NoMatch

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Charset(enum.Enum):
    """编码标识，值为描述文件中出现的标签文本；`DEFAULT` 没有标签，值为 None"""

    ASCII = 'ASCII'
    SHIFT_JIS = 'Shift_JIS'
    ISO_2022_JP = 'ISO-2022-JP'
    EUC_JP = 'EUC-JP'
    UTF_8 = 'UTF-8'
    DEFAULT = None

    @property
    def label(self) -> Optional[str]:
        """标签文本；`DEFAULT` 没有对应标签"""
        return self.value

    @property
    def codec(self) -> Optional[str]:
        """Python codecs 中使用的编码名；`DEFAULT` 取决于平台"""
        return _CODECS.get(self)

    @classmethod
    def from_label(cls, label: str) -> 'Charset':
        """按标签精确匹配（区分大小写）"""
        for charset in PARSE_ORDER:
            if charset.value == label:
                return charset
        raise NoMatch(label, 0, labels())

    def decode(self, data: BytesLike) -> str:
        """把字节按本编码解码为校验过的文本

        Raises:
            DecodeMismatch: 存在无效字节，或实际使用的编码与请求的不一致
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"decode() 需要 bytes 类型，实际为 {type(data).__name__}")
        data = bytes(data)

        if self is Charset.DEFAULT:
            return safe_decode(data, sys.getfilesystemencoding(), 'replace')

        requested = canonical_encoding(_CODECS[self])
        text, encoding_used, had_errors = decode_with_bom_sniffing(data, requested)
        if not had_errors and _REJECTED_CHARS.get(self, frozenset()).intersection(text):
            had_errors = True
        if had_errors or encoding_used != requested:
            logger.debug(f"{self.name} 解码校验失败: used={encoding_used}, had_errors={had_errors}")
            raise DecodeMismatch(self, encoding_used, had_errors, requested)
        return text


# 标签的尝试顺序
PARSE_ORDER = (
    Charset.ASCII,
    Charset.SHIFT_JIS,
    Charset.ISO_2022_JP,
    Charset.EUC_JP,
    Charset.UTF_8,
)

# ASCII 与 UTF-8 使用相同的解码方式
_CODECS = {
    Charset.ASCII: 'utf-8',
    Charset.SHIFT_JIS: 'cp932',
    Charset.ISO_2022_JP: 'iso2022_jp_ext',
    Charset.EUC_JP: 'euc_jis_2004',
    Charset.UTF_8: 'utf-8',
}

# cp932 把单字节 0xA0, 0xFD-0xFF 映射到私用区 U+F8F0-U+F8F3，这些字节应视为无效
_REJECTED_CHARS = {
    Charset.SHIFT_JIS: frozenset('\uf8f0\uf8f1\uf8f2\uf8f3'),
}


def labels() -> list:
    """按尝试顺序返回所有已知标签"""
    return [charset.value for charset in PARSE_ORDER]


__all__ = ['Charset', 'PARSE_ORDER', 'labels']
