"""API module for rankboard.

HTTP surface over the leaderboard pipeline:
- Accepts a CSV play log in the request body
- Returns the leaderboard as JSON or as the CLI's CSV table
- Forbidden: persistence, ranking logic (delegates to pipeline)
"""
