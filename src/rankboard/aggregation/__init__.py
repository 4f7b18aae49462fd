"""Aggregation module for per-player score totals.

- Consumes decoded LogRecords and builds one ScoreAccumulator per player
- Forbidden: file IO, ranking, output formatting
"""
