from functools import lru_cache

from docsim.services.detection_pipeline import DetectionPipeline


@lru_cache()
def get_detection_pipeline() -> DetectionPipeline:
    """获取检测流程单例"""
    return DetectionPipeline()
