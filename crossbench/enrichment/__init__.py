"""Enrichment of scored models with supplementary attributes."""

from crossbench.enrichment.knowledge_base import KnowledgeBase
from crossbench.enrichment.modality import detect_modalities, modalities_from_name

__all__ = ["KnowledgeBase", "detect_modalities", "modalities_from_name"]
