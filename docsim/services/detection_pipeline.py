"""Orchestration of a full detection run over a corpus."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

from docsim.core.errors import BaseApplicationError, EmptyInputError, require_positive
from docsim.core.logging import LogEvent
from docsim.services.base_service import BaseService
from docsim.services.containment import containment
from docsim.services.edit_distance import edit_distance
from docsim.services.highlighter import HighlightRenderer
from docsim.services.pipeline_metrics import PipelineMetrics
from docsim.services.ranking import all_pairs, rank_pairs
from docsim.services.similarity_matrix import SimilarityMatrix, build_similarity_matrix
from docsim.services.substring import similarity_ratio
from docsim.services.types import DocumentPair, ReportEntry


@dataclass
class DetectionResult:
    """Everything one run produces: matrix, full ranking, top-K entries."""
    matrix: SimilarityMatrix
    ranked_pairs: List[DocumentPair]
    entries: List[ReportEntry]
    min_length: int
    metrics: PipelineMetrics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_length": self.min_length,
            "matrix": self.matrix.to_list(),
            "ranked_pairs": [list(pair.as_tuple()) for pair in self.ranked_pairs],
            "entries": [entry.to_dict() for entry in self.entries],
            "metrics": self.metrics.to_dict(),
        }


class DetectionPipeline(BaseService):
    """documents -> similarity matrix -> ranking -> metrics for the top pairs"""

    def __init__(self, settings=None):
        super().__init__(settings)
        self.highlighter = HighlightRenderer()

    def run(
        self,
        documents: Sequence[str],
        min_length: Optional[int] = None,
        top_k: Optional[int] = None,
        max_workers: Optional[int] = None,
    ) -> DetectionResult:
        """
        Execute a detection run.

        Args:
            documents: ordered document texts; indices identify documents
            min_length: minimum common substring length (settings default)
            top_k: number of top pairs to evaluate in detail (settings default)
            max_workers: thread pool size, 1 runs sequentially (settings default)

        Raises:
            EmptyInputError: no documents.
            InvalidParameterError: a non-positive parameter.
            ResourceExhaustionError: a top pair is too long for containment;
                ``details["pair"]`` names the documents.
        """
        min_length = require_positive("min_length", self._default(min_length, self.settings.min_substring_length))
        top_k = require_positive("top_k", self._default(top_k, self.settings.top_k))
        max_workers = require_positive("max_workers", self._default(max_workers, self.settings.max_workers))

        if not documents:
            raise EmptyInputError("At least one document is required", operation="detect")

        metrics = PipelineMetrics(pipeline_id=uuid4().hex)
        self.logger.info(
            LogEvent.DETECTION_STARTED,
            pipeline_id=metrics.pipeline_id,
            documents=len(documents),
            min_length=min_length,
            top_k=top_k,
        )

        try:
            with metrics.stage("matrix", items=len(documents)):
                matrix = build_similarity_matrix(documents, min_length, max_workers=max_workers)

            with metrics.stage("rank") as stage:
                ranked = rank_pairs(matrix, all_pairs(len(documents)))
                stage.items = len(ranked)
            self.logger.info(LogEvent.PAIRS_RANKED, pairs=len(ranked))

            top_pairs = ranked[:top_k]
            with metrics.stage("metrics", items=len(top_pairs)):
                entries = self._evaluate_top_pairs(documents, matrix, top_pairs, min_length, max_workers)
        except BaseApplicationError as e:
            self.logger.error(
                LogEvent.DETECTION_FAILED,
                pipeline_id=metrics.pipeline_id,
                error_code=e.error_code.value,
                error=e.message,
                details=e.details,
            )
            raise

        metrics.finish()
        self.logger.info(
            LogEvent.DETECTION_COMPLETED,
            pipeline_id=metrics.pipeline_id,
            reported_pairs=len(entries),
            duration=round(metrics.total_execution_time, 3),
        )
        return DetectionResult(
            matrix=matrix,
            ranked_pairs=ranked,
            entries=entries,
            min_length=min_length,
            metrics=metrics,
        )

    def compare(self, text_a: str, text_b: str, min_length: Optional[int] = None) -> ReportEntry:
        """All three metrics and the highlighted rendering for a single pair."""
        min_length = require_positive("min_length", self._default(min_length, self.settings.min_substring_length))
        similarity = similarity_ratio(text_a, text_b, min_length)
        return self._evaluate_pair(1, DocumentPair(0, 1), text_a, text_b, similarity, min_length)

    def _evaluate_top_pairs(
        self,
        documents: Sequence[str],
        matrix: SimilarityMatrix,
        pairs: List[DocumentPair],
        min_length: int,
        max_workers: int,
    ) -> List[ReportEntry]:
        def evaluate(ranked: tuple) -> ReportEntry:
            rank, pair = ranked
            return self._evaluate_pair(
                rank,
                pair,
                documents[pair.left],
                documents[pair.right],
                matrix.score(pair),
                min_length,
            )

        jobs = list(enumerate(pairs, start=1))
        if max_workers == 1 or len(jobs) < 2:
            return [evaluate(job) for job in jobs]

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(evaluate, jobs))

    def _evaluate_pair(
        self,
        rank: int,
        pair: DocumentPair,
        text_a: str,
        text_b: str,
        similarity: float,
        min_length: int,
    ) -> ReportEntry:
        try:
            entry = ReportEntry(
                rank=rank,
                pair=pair,
                similarity=similarity,
                edit_distance=edit_distance(text_a, text_b),
                containment=containment(
                    text_a,
                    text_b,
                    max_length=self.settings.containment_max_length,
                    warn_length=self.settings.containment_warn_length,
                ),
                highlight=self.highlighter.highlight(text_a, text_b, min_length),
            )
        except BaseApplicationError as e:
            raise e.with_context(pair=list(pair.as_tuple()))

        self.logger.debug(
            LogEvent.PAIR_EVALUATED,
            rank=rank,
            left=pair.left,
            right=pair.right,
            similarity=round(similarity, 4),
            edit_distance=entry.edit_distance,
            containment=round(entry.containment, 4),
        )
        return entry

    @staticmethod
    def _default(value: Optional[int], fallback: int) -> int:
        return fallback if value is None else value
