"""Target visibility policy: which browser surfaces automation may see."""
from typing import Callable, Iterable

NEW_TAB_URL = "chrome://newtab/"

# Browser-internal, extension and untrusted-internal pages.
HIDDEN_PREFIXES = (
    "chrome://",
    "chrome-extension://",
    "chrome-untrusted://",
)

DEVTOOLS_PREFIX = "devtools://"


def make_target_filter(devtools: bool) -> Callable[[str], bool]:
    """Build a predicate ``url -> visible``.

    The new tab page is always visible. Internal, extension and
    untrusted-internal pages are always hidden. DevTools UI pages are hidden
    unless *devtools* is true, in which case they are ordinary pages.
    """
    hidden = HIDDEN_PREFIXES if devtools else HIDDEN_PREFIXES + (DEVTOOLS_PREFIX,)

    def target_filter(url: str) -> bool:
        if url == NEW_TAB_URL:
            return True
        return not url.startswith(hidden)

    return target_filter


def filter_pages(pages: Iterable, target_filter: Callable[[str], bool]) -> list:
    """Return the pages whose current URL passes *target_filter*."""
    return [p for p in pages if target_filter(p.url)]
