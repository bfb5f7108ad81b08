"""View filtering for ranked models."""

from crossbench.filters.view_filter import View, ViewFilter, drop_unscored

__all__ = ["View", "ViewFilter", "drop_unscored"]
