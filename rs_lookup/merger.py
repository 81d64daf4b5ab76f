"""
Activity feed reconciliation.

Upstream feeds are short rolling windows (the most recent ~20 events), so a
complete history has to be stitched together from successive fetches:

    older (stored):  [A, B, C]
    newer (fetched): [X, Y, A, B]
    merged:          [X, Y, A, B, C]

The newest stored item (``older[0]``) is the boundary marker. Everything in
``newer`` before the first item equal to the boundary is new; everything from
the boundary on is assumed to already be in ``older``. If the boundary is not
in ``newer`` at all, the gap between the two fetches is unknown and all of
``newer`` is prepended.

Known limitation: if the boundary item legitimately repeats (two identical
events in the same minute), the first match wins. No attempt is made to
disambiguate.
"""

from __future__ import annotations

import logging

from rs_lookup.models.feed import ActivityFeed

logger = logging.getLogger(__name__)


def merge_feeds(older: ActivityFeed, newer: ActivityFeed) -> ActivityFeed:
    """Prepend the items of ``newer`` that are not yet in ``older``.

    Neither input is modified.

    Args:
        older: The previously stored feed.
        newer: A freshly fetched feed.

    Returns:
        A new ``ActivityFeed``: new items of ``newer`` followed by all of
        ``older``. Equal to ``newer`` when ``older`` is empty.
    """
    if not older.items:
        logger.debug("merge_feeds: stored feed empty; taking %d fetched items", len(newer))
        return newer

    boundary = older.items[0]
    prepend = newer.items_after(boundary)

    if prepend and len(prepend) == len(newer):
        logger.info(
            "merge_feeds: boundary item not found in fetched feed; "
            "prepending all %d items (possible gap)", len(prepend),
        )
    else:
        logger.info("merge_feeds: prepending %d new items", len(prepend))

    return ActivityFeed(items=prepend + older.items)
