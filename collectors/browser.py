"""Ephemeral headless-browser session for client-rendered boards."""

from __future__ import annotations

from typing import Any

import structlog
from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from collectors.errors import FetchError, RenderTimeout

logger = structlog.get_logger(__name__)

# Same-origin anchor scan evaluated inside the rendered document.
ANCHOR_SCAN_SCRIPT = """
() => {
  const clean = (s) => (s || '').replace(/\\s+/g, ' ').trim();
  const out = [];
  for (const a of Array.from(document.querySelectorAll('a[href]'))) {
    const href = a.getAttribute('href') || '';
    if (!href) continue;
    let url;
    try { url = new URL(href, window.location.href); } catch (e) { continue; }
    if (url.origin !== window.location.origin) continue;
    const card = a.closest('div') || a.parentElement;
    out.push({
      href: href,
      url: url.toString(),
      title: clean(a.textContent),
      card_text: clean(card ? card.textContent : ''),
    });
  }
  return out;
}
"""


class BrowserSession:
    """One browser and one page, scoped to a single adapter call.

    Use as ``async with BrowserSession(...) as session``; the page, browser and
    driver are released on every exit path and teardown errors are swallowed.
    """

    def __init__(
        self,
        user_agent: str,
        headless: bool = True,
        timeout_ms: int = 60_000,
    ):
        self.user_agent = user_agent
        self.headless = headless
        self.timeout_ms = timeout_ms

        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._page: Page | None = None

    async def __aenter__(self) -> BrowserSession:
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=self.headless)
            self._page = await self._browser.new_page(user_agent=self.user_agent)
        except PlaywrightError as e:
            await self.close()
            raise FetchError(f"Could not start browser: {e}") from e
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Release page, browser and driver; never raises."""
        if self._page is not None:
            try:
                await self._page.close()
            except Exception as e:
                logger.debug("page_close_failed", error=str(e))
            self._page = None
        if self._browser is not None:
            try:
                await self._browser.close()
            except Exception as e:
                logger.debug("browser_close_failed", error=str(e))
            self._browser = None
        if self._playwright is not None:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.debug("playwright_stop_failed", error=str(e))
            self._playwright = None

    async def scan_anchors(
        self,
        url: str,
        wait_until: str,
        settle_ms: int,
    ) -> list[dict[str, str]]:
        """Navigate to ``url``, wait, and return the same-origin anchors.

        Each entry has ``href``, ``url``, ``title`` and ``card_text`` keys.

        Raises:
            RenderTimeout: If the wait condition is not reached in time
            FetchError: On any other navigation or evaluation failure
        """
        if self._page is None:
            raise RuntimeError("Session not started. Use 'async with' context.")

        try:
            await self._page.goto(url, wait_until=wait_until, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            raise RenderTimeout(
                f"Page did not reach '{wait_until}' within {self.timeout_ms}ms", url=url
            ) from e
        except PlaywrightError as e:
            raise FetchError(f"Navigation to {url} failed: {e}", url=url) from e

        try:
            # Some boards poll forever; give client-side rendering a fixed settle delay.
            await self._page.wait_for_timeout(settle_ms)
            anchors = await self._page.evaluate(ANCHOR_SCAN_SCRIPT)
        except PlaywrightError as e:
            raise FetchError(f"Could not read rendered page {url}: {e}", url=url) from e

        logger.debug("rendered", url=url, wait_until=wait_until, anchors=len(anchors))
        return list(anchors or [])
