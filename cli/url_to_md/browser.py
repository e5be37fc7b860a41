from __future__ import annotations

import importlib.metadata
import logging
import re
import subprocess
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .config import INSTALL_COMMAND, INSTALL_HINT, MIN_ENGINE_VERSION, FetchSettings
from .exceptions import NavigationError, ProvisioningError

logger = logging.getLogger(__name__)


def chromium_executable_path() -> Optional[str]:
    """Path where Playwright expects its Chromium build, installed or not."""
    try:
        with sync_playwright() as p:
            return p.chromium.executable_path
    except PlaywrightError as e:
        logger.debug("Could not resolve Chromium executable path: %s", e)
        return None


def playwright_version() -> str:
    return importlib.metadata.version("playwright")


def _version_tuple(version: str) -> Tuple[int, ...]:
    return tuple(int(part) for part in re.findall(r"\d+", version)[:2])


def _run_installer(command: Sequence[str]) -> int:
    # stdout is routed to stderr too, stdout is reserved for Markdown
    completed = subprocess.run(list(command), stdout=sys.stderr, stderr=sys.stderr, check=False)
    return completed.returncode


class BrowserProvisioner:
    """Makes sure a Chromium build usable by Playwright exists locally."""

    def __init__(
        self,
        locate: Callable[[], Optional[str]] = chromium_executable_path,
        run: Callable[[Sequence[str]], int] = _run_installer,
        install_command: Optional[List[str]] = None,
        engine_version: Callable[[], str] = playwright_version,
    ):
        self._locate = locate
        self._run = run
        self._engine_version = engine_version
        self.install_command = list(install_command or INSTALL_COMMAND)

    def is_installed(self) -> bool:
        path = self._locate()
        return bool(path) and Path(path).exists()

    def ensure_available(self) -> None:
        if self.is_installed():
            return

        version = self._engine_version()
        if _version_tuple(version) < MIN_ENGINE_VERSION:
            minimum = ".".join(str(part) for part in MIN_ENGINE_VERSION)
            raise ProvisioningError(f"Playwright {version} is too old, {minimum} or newer is required. Please run: pip install -U playwright")

        logger.info("Playwright browser not found. Installing Chromium...")
        logger.debug("Running %s (Playwright %s)", " ".join(self.install_command), version)
        try:
            returncode = self._run(self.install_command)
        except OSError as e:
            raise ProvisioningError(f"Failed to install Playwright browser ({e}). {INSTALL_HINT}") from e

        if returncode != 0:
            raise ProvisioningError(f"Failed to install Playwright browser. {INSTALL_HINT}")
        logger.info("✓ Browser installed successfully")


class PageFetcher:
    """Renders a page in headless Chromium and returns its serialized DOM."""

    def __init__(self, settings: Optional[FetchSettings] = None, playwright_factory=sync_playwright):
        self.settings = settings or FetchSettings()
        self._playwright_factory = playwright_factory

    def fetch(self, url: str) -> str:
        logger.info("Launching browser...")
        try:
            with self._playwright_factory() as p:
                return self._render(p, url)
        except PlaywrightError as e:
            raise NavigationError(f"Failed to load {url}: {e}") from e

    def _render(self, p, url: str) -> str:
        s = self.settings
        try:
            browser = p.chromium.launch(headless=True, args=list(s.launch_args))
        except PlaywrightError as e:
            raise NavigationError(f"Failed to launch browser: {e}") from e

        try:
            width, height = s.viewport
            context = browser.new_context(
                user_agent=s.user_agent,
                viewport={"width": width, "height": height},
                locale=s.locale,
                timezone_id=s.timezone_id,
                extra_http_headers=dict(s.extra_headers),
            )
            page = context.new_page()
            page.add_init_script(s.init_script)

            logger.info("Navigating to %s...", url)
            page.goto(url, wait_until="domcontentloaded", timeout=s.navigation_timeout_ms)

            page.wait_for_timeout(s.settle_delay_ms)
            # lazy-loaded images and sections often wait for a scroll event
            page.evaluate("(fraction) => window.scrollBy(0, window.innerHeight * fraction)", s.scroll_fraction)
            page.wait_for_timeout(s.scroll_delay_ms)

            return page.content()
        finally:
            browser.close()
