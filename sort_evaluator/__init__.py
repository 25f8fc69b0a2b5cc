"""Sorting algorithm performance evaluator."""

from sort_evaluator.core import Algorithm, Measurement, ResultSet, evaluate_all, measure, select_best
from sort_evaluator.orchestrator import AnalysisOrchestrator, Preview

__all__ = [
    "Algorithm",
    "Measurement",
    "ResultSet",
    "evaluate_all",
    "measure",
    "select_best",
    "AnalysisOrchestrator",
    "Preview",
]
