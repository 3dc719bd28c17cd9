"""
文档解析器基类

单一职责：只定义解析接口
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class BaseParser(ABC):
    """极简的文档解析器基类"""

    @abstractmethod
    def parse(self, file_path: Union[str, Path]) -> str:
        """
        解析文档并提取纯文本内容。

        Args:
            file_path: 文档文件路径

        Returns:
            提取的纯文本内容

        Raises:
            DocumentLoadError: 文件无法读取
        """
