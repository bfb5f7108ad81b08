"""Persistence of leaderboard artifacts."""

from crossbench.storage.exporter import LeaderboardExporter

__all__ = ["LeaderboardExporter"]
