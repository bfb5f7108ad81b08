"""Modality detection from explicit tags or model-name heuristics."""

from crossbench.models.model_entity import Modality

# Explicit tag spellings accepted from sources
TAG_MAP = {
    "text": Modality.TEXT,
    "image": Modality.IMAGE,
    "vision": Modality.IMAGE,
    "video": Modality.VIDEO,
}

IMAGE_GENERATOR_MARKERS = ["midjourney", "stable diffusion", "dall-e", "imagen"]

VIDEO_GENERATOR_MARKERS = [
    "sora",
    "runway",
    "gen-2",
    "gen-3",
    "pika",
    "animatediff",
    "stable video",
    "kling",
    "video generation",
]

VISION_LLM_MARKERS = [
    "gpt-4",
    "gpt-5",
    "claude 3",
    "claude 4",
    "gemini",
    "llama 3.2 11b",
    "llama 3.2 90b",
    "pixtral",
    "qvq",
    "vision",
    "-vl",
    "diffusion",
]


def _contains_any(text: str, markers: list[str]) -> bool:
    return any(marker in text for marker in markers)


def modalities_from_tags(tags: list[str]) -> set[Modality]:
    """Map source tags to modalities; unknown tags are ignored."""
    return {TAG_MAP[t.strip().lower()] for t in tags if t.strip().lower() in TAG_MAP}


def modalities_from_name(name: str) -> set[Modality]:
    """Guess modalities from a model name.

    Generators are checked before vision LLMs so that e.g. "Stable Video
    Diffusion" lands in video rather than image.
    """
    n = name.lower()

    if _contains_any(n, IMAGE_GENERATOR_MARKERS):
        return {Modality.IMAGE, Modality.TEXT}

    if _contains_any(n, VIDEO_GENERATOR_MARKERS):
        return {Modality.VIDEO, Modality.TEXT}

    vision_grok = "grok" in n and _contains_any(n, ["-2", "-3", "-4"])
    vision_qwen = "qwen" in n and "vl" in n
    if vision_grok or vision_qwen or _contains_any(n, VISION_LLM_MARKERS):
        return {Modality.IMAGE, Modality.TEXT}

    return {Modality.TEXT}


def detect_modalities(name: str, tags: list[str] | None) -> set[Modality]:
    """Explicit tags win when the source provides a list; otherwise use the name."""
    if tags is not None:
        return modalities_from_tags(tags)
    return modalities_from_name(name)
