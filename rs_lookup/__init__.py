"""
RuneScape Lookup — typed player data from RuneScape web API responses.

Public entry points:
  rs_lookup.conversion.PlayerDataConverter   — decode index_lite / RuneMetrics / RSS
  rs_lookup.merger.merge_feeds               — reconcile stored and fetched feeds
"""

__version__ = "0.1.0"
