"""
纯文本解析器 - 自动尝试多种编码读取原始字符序列。
"""

from pathlib import Path
from typing import Sequence, Union

from docsim.core.errors import DocumentLoadError
from docsim.core.logging import get_logger
from .readers_base import BaseParser

logger = get_logger(__name__)

# utf-8-sig 兼容无 BOM 的 UTF-8 并去掉 BOM; gbk 须在 cp1252 之前，否则中文会被误解码
DEFAULT_ENCODINGS = ('utf-8-sig', 'gbk', 'cp1252')


class TextParser(BaseParser):
    """
    Parser for plain text files with automatic encoding detection.

    Text is returned verbatim: no normalization, no tokenization.
    """

    def __init__(self, encodings: Sequence[str] = DEFAULT_ENCODINGS):
        self.encodings = tuple(encodings)

    def parse(self, file_path: Union[str, Path]) -> str:
        path = Path(file_path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise DocumentLoadError(str(e), path=str(path)) from e

        for encoding in self.encodings:
            try:
                return raw.decode(encoding)
            except UnicodeDecodeError:
                continue

        logger.warning("decode_fallback", path=str(path), encodings=list(self.encodings))
        return raw.decode('utf-8', errors='ignore')
