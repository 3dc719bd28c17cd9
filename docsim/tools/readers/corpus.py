"""
语料加载 - 枚举目录中的文档并按文件名排序读取，保证文档索引在多次运行间稳定。
"""

from pathlib import Path
from typing import List, Optional, Union

from docsim.core.errors import DocumentLoadError
from docsim.core.logging import LogEvent, get_logger
from docsim.services.types import Corpus
from .readers_base import BaseParser
from .readers_text import TextParser

logger = get_logger(__name__)


def list_documents(folder: Union[str, Path]) -> List[Path]:
    """目录下所有非隐藏的普通文件，按文件名排序"""
    root = Path(folder)
    if not root.is_dir():
        raise DocumentLoadError("folder does not exist or is not a directory", path=str(root))

    files = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.name.startswith('.'):
            logger.debug(LogEvent.DOCUMENT_SKIPPED, path=str(entry), reason="hidden")
            continue
        if not entry.is_file():
            logger.debug(LogEvent.DOCUMENT_SKIPPED, path=str(entry), reason="not_a_file")
            continue
        files.append(entry)
    return files


def load_corpus(folder: Union[str, Path], parser: Optional[BaseParser] = None) -> Corpus:
    """
    读取目录中的全部文档

    Args:
        folder: 文档目录
        parser: 解析器，默认为 TextParser

    Returns:
        Corpus: 文档文本与对应文件名，索引一一对应
    """
    parser = parser or TextParser()
    files = list_documents(folder)

    documents = [parser.parse(path) for path in files]
    names = [path.name for path in files]

    logger.info(
        LogEvent.CORPUS_LOADED,
        folder=str(folder),
        documents=len(documents),
        total_characters=sum(len(d) for d in documents),
    )
    return Corpus(documents=documents, names=names)
