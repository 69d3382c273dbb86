from collections.abc import Sequence

from pokescroll.models import Item


def filter_items(items: Sequence[Item], query: str) -> list[Item]:
    """Return the items whose name contains ``query``, ignoring case.

    An empty query keeps every item. Order is always that of ``items``.
    """
    if not query:
        return list(items)
    needle = query.casefold()
    return [item for item in items if needle in item.name.casefold()]
