"""
服务模块 - 相似度计算核心与检测流程
"""

from docsim.services.base_service import BaseService
from docsim.services.containment import containment
from docsim.services.detection_pipeline import DetectionPipeline, DetectionResult
from docsim.services.edit_distance import edit_distance
from docsim.services.highlighter import HighlightRenderer, highlight
from docsim.services.ranking import all_pairs, rank_pairs
from docsim.services.similarity_matrix import SimilarityMatrix, build_similarity_matrix
from docsim.services.substring import find_common_substrings, similarity_ratio

__all__ = [
    # 基础类
    'BaseService',

    # 相似度指标
    'find_common_substrings',
    'similarity_ratio',
    'edit_distance',
    'containment',

    # 矩阵与排序
    'SimilarityMatrix',
    'build_similarity_matrix',
    'all_pairs',
    'rank_pairs',

    # 高亮
    'HighlightRenderer',
    'highlight',

    # 检测流程
    'DetectionPipeline',
    'DetectionResult',
]
