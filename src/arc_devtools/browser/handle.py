"""Shared handle to one live browser connection."""
import logging
from typing import Callable

from .targets import filter_pages

log = logging.getLogger(__name__)


class BrowserHandle:
    """Wraps a Playwright ``Browser`` (connect) or persistent ``BrowserContext`` (launch).

    The handle watches Playwright's ``disconnected``/``close`` events so
    ``connected`` turns false once the remote end goes away. Only pages that
    pass *target_filter* are exposed through :meth:`pages`.
    """

    def __init__(self, *, browser=None, context=None,
                 target_filter: Callable[[str], bool]):
        if browser is None and context is None:
            raise ValueError("BrowserHandle needs a browser or a context")
        if context is None and browser.contexts:
            context = browser.contexts[0]
        self._browser = browser
        self._context = context
        self._closed = False
        self.target_filter = target_filter
        if browser is not None:
            browser.on("disconnected", self._on_gone)
        else:
            context.on("close", self._on_gone)

    def _on_gone(self, _source):
        if not self._closed:
            log.info("Browser connection lost")
        self._closed = True

    @property
    def browser(self):
        """The Playwright Browser, or None for a launched persistent context."""
        return self._browser if self._browser is not None else self._context.browser

    @property
    def context(self):
        return self._context

    @property
    def connected(self) -> bool:
        if self._closed:
            return False
        if self._browser is not None:
            return self._browser.is_connected()
        return True

    def pages(self) -> list:
        """Open pages visible to automation, across every context."""
        if self._browser is not None:
            contexts = self._browser.contexts
        else:
            contexts = [self._context]
        return filter_pages(
            (page for ctx in contexts for page in ctx.pages),
            self.target_filter,
        )

    async def new_page(self):
        if self._context is None:
            self._context = await self._browser.new_context(no_viewport=True)
        return await self._context.new_page()

    async def close(self) -> None:
        """Close the connection. Launched browsers exit with it."""
        if self._closed:
            return
        if self._browser is not None:
            await self._browser.close()
        else:
            await self._context.close()
        self._closed = True
