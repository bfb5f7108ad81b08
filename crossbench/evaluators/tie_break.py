"""Recency tie-break ordering for ranked views.

Pairwise rule: two scores within epsilon are a near-tie and are ordered by
recency tier (fresher first); otherwise the higher score comes first. Equal
tiers inside a near-tie are incomparable.

The pairwise rule alone is not transitive across chains (a~b and b~c does not
imply a~c), so sorting groups models into near-tie groups anchored at the
highest remaining score. Every member of a group is within epsilon of the
anchor and of each other, groups are ordered by anchor score, and members by
recency tier. The resulting sort key is a strict weak ordering for any input.
"""

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from crossbench.models.model_entity import ModelEntity, Projection

DEFAULT_EPSILON = 0.005


def compare_scores(
    score_a: float,
    score_b: float,
    recency_a: int,
    recency_b: int,
    epsilon: float = DEFAULT_EPSILON,
) -> int:
    """Compare two candidates for display order.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if incomparable
    """
    if abs(score_a - score_b) <= epsilon:
        return recency_b - recency_a
    return -1 if score_a > score_b else 1


def near_tie_groups(
    entities: Iterable[ModelEntity],
    score_fn: Callable[[ModelEntity], float],
    epsilon: float = DEFAULT_EPSILON,
) -> list[list[ModelEntity]]:
    """Partition models into anchored near-tie groups, best group first."""
    ordered = sorted(entities, key=lambda e: (-score_fn(e), e.name))

    groups: list[list[ModelEntity]] = []
    anchor: float | None = None
    for entity in ordered:
        score = score_fn(entity)
        if anchor is None or anchor - score > epsilon:
            groups.append([])
            anchor = score
        groups[-1].append(entity)
    return groups


def sort_with_tie_break(
    entities: Iterable[ModelEntity],
    score_fn: Callable[[ModelEntity], float],
    epsilon: float = DEFAULT_EPSILON,
) -> list[ModelEntity]:
    """Sort models by score descending, breaking near-ties by recency tier.

    Args:
        entities: Models to order
        score_fn: Extracts the score being ranked on
        epsilon: Near-tie threshold on the same scale as score_fn's values

    Returns:
        New list in display order
    """
    result: list[ModelEntity] = []

    def member_order(a: ModelEntity, b: ModelEntity) -> int:
        # Group members are all within epsilon of each other, so the pairwise
        # rule orders them by recency; incomparable pairs fall back to score, name.
        order = compare_scores(score_fn(a), score_fn(b), a.recency_tier, b.recency_tier, epsilon)
        if order:
            return order
        key_a, key_b = (-score_fn(a), a.name), (-score_fn(b), b.name)
        return (key_a > key_b) - (key_a < key_b)

    for group in near_tie_groups(entities, score_fn, epsilon):
        group.sort(key=cmp_to_key(member_order))
        result.extend(group)
    return result


def sort_by_projection(
    entities: Iterable[ModelEntity],
    projection: Projection,
    epsilon: float,
) -> list[ModelEntity]:
    """Tie-break sort on the exported value of a projection (0-100 scale)."""
    return sort_with_tie_break(
        entities, lambda e: e.ranks.clamped().get(projection), epsilon
    )
