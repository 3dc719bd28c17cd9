from typing import Dict

from fastapi import APIRouter

from docsim.core.config import get_settings

router = APIRouter()


@router.get("")
async def health_check() -> Dict[str, str]:
    """
    健康检查

    检测核心是纯计算，没有外部依赖，存活即就绪
    """
    settings = get_settings()
    return {"status": "healthy", "version": settings.version}
