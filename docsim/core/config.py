"""
配置管理 - 使用Pydantic Settings实现环境变量管理
所有检测参数均可通过 DOCSIM_ 前缀的环境变量或 .env 文件覆盖
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类 - 所有配置项通过环境变量管理"""

    # API配置
    api_v1_prefix: str = Field(default="/api/v1", description="API路由前缀")
    project_name: str = Field(default="docsim", description="项目名称")
    version: str = Field(default="1.0.0", description="版本号")
    environment: str = Field(default="production", description="运行环境 (development 时向客户端返回异常详情)")

    # 检测配置
    min_substring_length: int = Field(default=5, description="公共子串最小长度")
    top_k: int = Field(default=10, description="报告中展示的最相似文档对数量")
    max_workers: int = Field(default=1, description="相似度矩阵计算的工作线程数")

    # 包含度计算的资源上限 (子串枚举为平方级内存)
    containment_max_length: int = Field(
        default=2000,
        description="Broder包含度允许的最大文本长度，0表示不限制",
    )
    containment_warn_length: int = Field(
        default=500,
        description="超过该长度时记录慢操作警告",
    )

    # 批处理配置
    dataset_dir: str = Field(default="dataset", description="待检测文档目录")
    report_path: str = Field(default="similar_texts.html", description="HTML报告输出路径")

    # 日志配置
    log_level: str = Field(default="INFO", description="日志级别")
    json_logs: bool = Field(default=False, description="是否输出JSON格式日志")
    log_file: Optional[str] = Field(default=None, description="日志文件路径")

    # CORS 配置
    cors_allow_origins: str = Field(default="*", description="允许的跨域来源，逗号分隔")

    model_config = SettingsConfigDict(
        env_prefix="DOCSIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("min_substring_length", "top_k", "max_workers")
    @classmethod
    def _must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value

    @field_validator("containment_max_length", "containment_warn_length")
    @classmethod
    def _must_not_be_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must not be negative")
        return value

    def get_cors_origins(self) -> list[str]:
        """返回允许的 CORS 来源列表"""
        raw = (self.cors_allow_origins or "").strip()
        if not raw:
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    获取配置单例
    使用lru_cache确保全局只有一个Settings实例
    """
    return Settings()
