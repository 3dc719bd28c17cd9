"""
检测数据模型 - API 请求与响应
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class CompareRequest(BaseModel):
    """单对文本对比请求"""
    text_a: str
    text_b: str
    min_length: Optional[int] = Field(default=None, description="公共子串最小长度，缺省使用配置值")


class CompareResponse(BaseModel):
    """单对文本对比结果"""
    similarity: float
    edit_distance: int
    containment: float
    left_html: str
    right_html: str


class DetectRequest(BaseModel):
    """语料检测请求 - 文档按列表顺序编号"""
    documents: List[str]
    names: Optional[List[str]] = Field(default=None, description="可选的文档名称，用于报告标题")
    min_length: Optional[int] = None
    top_k: Optional[int] = None


class PairEntry(BaseModel):
    """排名靠前的文档对"""
    rank: int
    left: int
    right: int
    similarity: float
    edit_distance: int
    containment: float
    left_html: str
    right_html: str


class DetectResponse(BaseModel):
    """语料检测结果"""
    min_length: int
    matrix: List[List[float]]
    ranked_pairs: List[List[int]]
    entries: List[PairEntry]
    metrics: dict
