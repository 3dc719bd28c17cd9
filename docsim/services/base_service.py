"""
基础服务类 - 所有服务的公共功能
"""
from typing import Optional

from docsim.core.config import Settings, get_settings
from docsim.core.logging import get_logger


class BaseService:
    """
    基础服务类 - 提供所有服务的公共功能

    Features:
    - Automatic logger initialization
    - Settings access (injectable for tests)
    """

    def __init__(self, settings: Optional[Settings] = None):
        """初始化基础服务"""
        self.logger = get_logger(self.__class__.__module__)
        self.settings = settings or get_settings()

    def __repr__(self):
        """Simple representation for debugging"""
        return f"<{self.__class__.__name__}>"
