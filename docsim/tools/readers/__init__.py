"""
文档读取工具包

支持的文档格式：纯文本 (任意扩展名，按原始字符读取)
"""

from .corpus import list_documents, load_corpus
from .readers_base import BaseParser
from .readers_text import TextParser

__all__ = [
    'BaseParser',
    'TextParser',
    'list_documents',
    'load_corpus',
]
