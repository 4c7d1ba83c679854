"""Structured JSONL logging of browser-side output."""
import json
import logging
import os
import time
from typing import IO

log = logging.getLogger(__name__)


class BrowserEventLogger:
    """Writes one JSON line per browser event to a log sink.

    *sink* is either a file path (opened for append, parent directories
    created) or an already-open text stream, which is left open on close.

    All logging is best-effort: methods never raise exceptions. Events are
    only seen from :meth:`attach` onwards, so output the browser produces
    while starting up is not captured.
    """

    def __init__(self, sink: str | os.PathLike | IO[str]):
        self._f = None
        self._owns_file = False
        self._context = None
        if isinstance(sink, (str, os.PathLike)):
            try:
                parent = os.path.dirname(os.fspath(sink))
                if parent:
                    os.makedirs(parent, exist_ok=True)
                self._f = open(sink, "a", encoding="utf-8")
                self._owns_file = True
            except Exception as e:
                log.warning(f"BrowserEventLogger: failed to open log file: {e}")
        else:
            self._f = sink

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _write(self, event: dict):
        if self._f is None:
            return
        try:
            event["ts"] = time.time()
            self._f.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._f.flush()
        except Exception as e:
            log.warning(f"BrowserEventLogger: write failed: {e}")

    def attach(self, context) -> None:
        """Start recording events from a Playwright BrowserContext."""
        self._context = context
        context.on("page", self._watch_page)
        context.on("close", self._on_context_close)
        for page in context.pages:
            self._watch_page(page, opened=False)
        self._write({"event": "attached", "pages": len(context.pages)})

    def detach(self) -> None:
        if self._context is None:
            return
        try:
            self._context.remove_listener("page", self._watch_page)
            self._context.remove_listener("close", self._on_context_close)
        except Exception as e:
            log.warning(f"BrowserEventLogger: detach failed: {e}")
        self._context = None

    def _watch_page(self, page, opened: bool = True):
        if opened:
            self._write({"event": "page_opened", "url": page.url})
        page.on("console", lambda msg: self._write({
            "event": "console",
            "url": page.url,
            "type": msg.type,
            "text": msg.text,
        }))
        page.on("pageerror", lambda error: self._write({
            "event": "page_error",
            "url": page.url,
            "error": str(error),
        }))
        page.on("crash", lambda p: self._write({"event": "page_crash", "url": p.url}))
        page.on("close", lambda p: self._write({"event": "page_closed", "url": p.url}))

    def _on_context_close(self, _context):
        self._write({"event": "context_closed"})

    def close(self):
        self.detach()
        if self._f is not None:
            try:
                self._f.flush()
                if self._owns_file:
                    self._f.close()
            except Exception:
                pass
            self._f = None
