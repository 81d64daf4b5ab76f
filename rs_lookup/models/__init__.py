"""
Domain models.

Submodules:
  highscore — Player, SkillEntry, ActivityEntry, HighscoreSnapshot
  feed      — FeedItem, ActivityFeed

All models are frozen pydantic models.
"""
