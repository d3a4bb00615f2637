"""通用解码工具

为编码标识的解码分派提供底层能力：BOM 嗅探、严格解码并报告实际编码、
以及保证不抛异常的有损解码。
"""

import codecs
import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# BOM 优先级：UTF-8 的 BOM 最长，先判断
_BOMS = (
    (codecs.BOM_UTF8, 'utf-8'),
    (codecs.BOM_UTF16_LE, 'utf-16-le'),
    (codecs.BOM_UTF16_BE, 'utf-16-be'),
)


def canonical_encoding(name: str) -> str:
    """返回 codecs 注册表中的规范编码名（例如 'UTF-8' -> 'utf-8'）"""
    return codecs.lookup(name).name


def detect_encoding_by_bom(data: bytes) -> Tuple[Optional[str], int]:
    """通过 BOM (Byte Order Mark) 检测编码

    Returns:
        (编码名称, BOM 字节长度)，无 BOM 时返回 (None, 0)
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return None, 0


def decode_with_bom_sniffing(data: bytes, encoding: str) -> Tuple[str, str, bool]:
    """按指定编码解码，开头的 BOM 会覆盖请求的编码

    Args:
        data: 要解码的字节数据
        encoding: 请求的编码

    Returns:
        (解码后的文本, 实际使用的编码, 是否发生了替换)
    """
    encoding_used = canonical_encoding(encoding)
    bom_encoding, bom_length = detect_encoding_by_bom(data)
    if bom_encoding:
        encoding_used = canonical_encoding(bom_encoding)
        data = data[bom_length:]
        logger.debug(f"通过 BOM 检测到编码: {encoding_used} (请求: {encoding})")

    try:
        return data.decode(encoding_used), encoding_used, False
    except UnicodeDecodeError as e:
        logger.debug(f"{encoding_used} 解码出现无效字节: {e}")
        return data.decode(encoding_used, errors='replace'), encoding_used, True


def safe_decode(
    data: bytes,
    encoding: str = 'utf-8',
    errors: str = 'replace'
) -> str:
    """安全解码 - 保证不会抛出异常

    Args:
        data: 要解码的字节数据
        encoding: 编码格式
        errors: 错误处理方式 ('replace', 'ignore', 'surrogateescape')

    Returns:
        解码后的文本
    """
    if not data:
        return ''
    try:
        return data.decode(encoding, errors=errors)
    except (UnicodeDecodeError, LookupError):
        return data.decode('utf-8', errors='replace')


def header_text(data: bytes, limit: Optional[int] = None) -> str:
    """把头部区域按 UTF-8 有损解码，用于提取人类可读的编码标签"""
    if limit is not None:
        data = data[:limit]
    return safe_decode(data, 'utf-8')


__all__ = [
    'canonical_encoding',
    'detect_encoding_by_bom',
    'decode_with_bom_sniffing',
    'safe_decode',
    'header_text',
]
