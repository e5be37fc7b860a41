"""Tunable constants for the browser fetch and install steps."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

INSTALL_COMMAND: List[str] = [sys.executable, "-m", "playwright", "install", "chromium"]
INSTALL_HINT = "Please run: playwright install chromium"
# oldest Playwright release whose Chromium build this tool is run against
MIN_ENGINE_VERSION: Tuple[int, int] = (1, 48)

HIDE_WEBDRIVER_SCRIPT = "Object.defineProperty(navigator, 'webdriver', {get: () => undefined})"


def _default_headers() -> Dict[str, str]:
    return {
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate, br",
        "DNT": "1",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Sec-Fetch-User": "?1",
        "Cache-Control": "max-age=0",
    }


@dataclass(frozen=True)
class FetchSettings:
    """How the headless browser is launched and how long it waits for the page.

    The delays and the half-viewport scroll are heuristics for pages that
    render or lazy-load their content with JavaScript.
    """

    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/131.0.0.0 Safari/537.36"
    )
    viewport: Tuple[int, int] = (1920, 1080)
    locale: str = "en-US"
    timezone_id: str = "America/New_York"
    extra_headers: Dict[str, str] = field(default_factory=_default_headers)
    launch_args: Tuple[str, ...] = (
        "--disable-blink-features=AutomationControlled",
        "--disable-features=IsolateOrigins,site-per-process",
        "--no-sandbox",
        "--disable-setuid-sandbox",
    )
    init_script: str = HIDE_WEBDRIVER_SCRIPT
    navigation_timeout_ms: int = 60_000
    settle_delay_ms: int = 2_000
    scroll_delay_ms: int = 1_000
    scroll_fraction: float = 0.5
