"""Evaluators module for scoring models across benchmark sources.

Each model flows through independent stages:
- Signal collection (weighted benchmark observations)
- Aggregation (fused final score, recency tier)
- Confidence (single-pass reliability estimate)
- Ranking (eight projection scores with modality policies)

Ecosystem statistics and tie-break ordering operate on whole batches.
"""

from crossbench.evaluators.aggregation import aggregate, assign_recency_tier, fuse_signals
from crossbench.evaluators.confidence import ConfidenceEvaluator, compute_confidence
from crossbench.evaluators.ecosystem import compute_ecosystem, compute_org_stats
from crossbench.evaluators.ranking import RankingEvaluator, value_score
from crossbench.evaluators.registry import ScoringRegistry
from crossbench.evaluators.signal_collector import SignalCollector
from crossbench.evaluators.tie_break import (
    compare_scores,
    sort_by_projection,
    sort_with_tie_break,
)

__all__ = [
    # Stages
    "SignalCollector",
    "ConfidenceEvaluator",
    "RankingEvaluator",
    # Orchestration
    "ScoringRegistry",
    # Aggregation
    "aggregate",
    "assign_recency_tier",
    "fuse_signals",
    "compute_confidence",
    "value_score",
    # Batch statistics
    "compute_ecosystem",
    "compute_org_stats",
    # Ordering
    "compare_scores",
    "sort_by_projection",
    "sort_with_tie_break",
]
