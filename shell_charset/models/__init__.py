"""Application data models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from shell_charset.services.charset.charset import Charset


@dataclass
class DecodeResult:
    charset: Charset
    text: str
    # 头部是否找到了编码标签
    label_found: bool = True
    fallback_used: bool = False
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'charset': self.charset.name,
            'label': self.charset.label,
            'text': self.text,
            'label_found': self.label_found,
            'fallback_used': self.fallback_used,
            'error': self.error,
        }
