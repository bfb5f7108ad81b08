"""CrossBench - bias-adjusted aggregation of AI model leaderboards."""
