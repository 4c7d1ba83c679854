"""Resize a live page's content area through a raw CDP session.

Playwright's ``set_viewport_size`` emulates a viewport inside the window; this
module instead resizes the real browser window so the page content area
matches the requested size.
"""
import logging

from playwright.async_api import Error as PlaywrightError

log = logging.getLogger(__name__)

_FRAME_SIZE_JS = """
() => [window.outerWidth - window.innerWidth, window.outerHeight - window.innerHeight]
"""


async def resize_content(page, width: int, height: int) -> None:
    """Resize the window holding *page* so its content area is width x height.

    Uses ``Browser.setContentsSize`` where the browser supports it. Older
    Chromium builds fall back to ``Browser.setWindowBounds`` plus the window
    frame measured from the page.
    """
    cdp = await page.context.new_cdp_session(page)
    try:
        window = await cdp.send("Browser.getWindowForTarget")
        window_id = window["windowId"]
        try:
            await cdp.send(
                "Browser.setContentsSize",
                {"windowId": window_id, "width": width, "height": height},
            )
        except PlaywrightError as e:
            log.debug("Browser.setContentsSize unavailable (%s); using window bounds", e)
            frame_w, frame_h = await page.evaluate(_FRAME_SIZE_JS)
            await cdp.send(
                "Browser.setWindowBounds",
                {
                    "windowId": window_id,
                    "bounds": {"width": width + frame_w, "height": height + frame_h},
                },
            )
        log.info("Resized page content to %dx%d", width, height)
    finally:
        await cdp.detach()
