#
#
#

from collections import namedtuple

from .exceptions import NotFound

PER_PAGE = 100

Page = namedtuple('Page', ('items', 'total_entries'))


def paginate(fetch_page, per_page=PER_PAGE):
    """Drain a page-based listing into a single list.

    Args:
        fetch_page: Callable taking (page, per_page), returning a Page
        per_page: Page size requested from the remote

    Returns:
        All items, in the order the remote returned them

    The expected total is taken from the first page and the loop stops once
    that many items were collected. A NotFound from fetch_page ends the
    collection instead of failing it, as does an empty page. Any other error
    propagates and the partial result is dropped.
    """
    items = []
    total = None
    page = 1

    while True:
        try:
            result = fetch_page(page, per_page)
        except NotFound:
            break

        if total is None:
            total = result.total_entries
        items.extend(result.items)

        if len(items) == total or not result.items:
            break

        page += 1

    return items
