"""编码标签解析 / 解码的异常类型"""

from __future__ import annotations

from typing import Optional, Sequence


class CharsetError(ValueError):
    """编码相关错误的基类"""


class NoMatch(CharsetError):
    """输入开头不是任何已知的编码标签"""

    def __init__(self, text: str, position: int = 0, labels: Sequence[str] = ()):
        # 结构化字段放进 args，pickle 时按 cls(*args) 重建
        super().__init__(text, position, tuple(labels))
        self.text = text
        self.position = position
        self.labels = list(labels)

    def __str__(self) -> str:
        return f"无法识别的编码标签: {self.text[:32]!r} (位置 {self.position}, 期望 {', '.join(self.labels)})"


class DecodeMismatch(CharsetError):
    """请求的编码无法无损且准确地解码给定字节"""

    def __init__(
        self,
        charset,
        encoding_used: Optional[str] = None,
        had_errors: bool = False,
        requested: Optional[str] = None,
    ):
        super().__init__(charset, encoding_used, had_errors, requested)
        self.charset = charset
        self.encoding_used = encoding_used
        self.had_errors = had_errors
        self.requested = requested

    @property
    def switched(self) -> bool:
        """实际使用的编码是否与请求的不同"""
        return bool(self.requested and self.encoding_used and self.encoding_used != self.requested)

    def __str__(self) -> str:
        if self.switched:
            reason = f"实际使用的编码为 {self.encoding_used}"
        else:
            reason = "存在无效字节序列"
        return f"按 {self.charset.name} 解码失败: {reason}"


__all__ = ['CharsetError', 'NoMatch', 'DecodeMismatch']
