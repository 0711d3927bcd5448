"""
HTML to PDF through headless Chromium (Playwright).

Setup (one-time, unless a system Chrome is used):
    python -m playwright install chromium
"""

import logging
import os
import sys
import time
from typing import Any, Dict, List, Mapping, Optional

from playwright.sync_api import sync_playwright

from .config import PAGE_FORMAT, PAGE_RANGES, RENDER_TIMEOUT_MS
from .errors import RenderingError

logger = logging.getLogger(__name__)

# Chromium flags for serverless sandboxes (no /dev/shm, no zygote, no GPU)
SERVERLESS_CHROMIUM_ARGS = [
    '--no-sandbox',
    '--disable-gpu',
    '--single-process',
    '--no-zygote',
    '--disable-dev-shm-usage',
]

# Locally installed Google Chrome, by sys.platform prefix
SYSTEM_CHROME_PATHS = {
    'win32': 'C:\\Program Files (x86)\\Google\\Chrome\\Application\\chrome.exe',
    'linux': '/usr/bin/google-chrome',
    'darwin': '/Applications/Google Chrome.app/Contents/MacOS/Google Chrome',
}


def resolve_launch_options(env: Optional[Mapping[str, str]] = None,
                           platform: Optional[str] = None,
                           path_exists=os.path.exists) -> Dict[str, Any]:
    """Work out how to launch Chromium in this environment.

    On AWS the serverless flags are used. Otherwise an explicit
    CHROMIUM_EXECUTABLE_PATH wins, then the platform's installed Google Chrome.
    When nothing is found ``executable_path`` is None and Playwright uses its own Chromium.
    """
    env = os.environ if env is None else env
    platform = sys.platform if platform is None else platform

    explicit_path = (env.get('CHROMIUM_EXECUTABLE_PATH') or '').strip() or None

    if env.get('AWS_REGION'):
        return {
            'executable_path': explicit_path,
            'args': list(SERVERLESS_CHROMIUM_ARGS),
            'headless': True,
        }

    if explicit_path:
        return {'executable_path': explicit_path, 'args': [], 'headless': True}

    for prefix, path in SYSTEM_CHROME_PATHS.items():
        if platform.startswith(prefix) and path_exists(path):
            return {'executable_path': path, 'args': [], 'headless': True}

    return {'executable_path': None, 'args': [], 'headless': True}


class PDFRenderer:
    """Prints card markup to a one-page PDF.

    A browser is launched for every call and closed before returning, so a
    renderer holds no process state and can be shared freely.
    """

    def __init__(self, executable_path: Optional[str] = None, launch_args: Optional[List[str]] = None,
                 headless: bool = True, page_format: str = PAGE_FORMAT, page_ranges: str = PAGE_RANGES,
                 timeout_ms: int = RENDER_TIMEOUT_MS):
        self.executable_path = executable_path
        self.launch_args = list(launch_args or [])
        self.headless = headless
        self.page_format = page_format
        self.page_ranges = page_ranges
        self.timeout_ms = timeout_ms

    @classmethod
    def from_config(cls) -> 'PDFRenderer':
        options = resolve_launch_options()
        logger.info("Chromium executable: %s", options['executable_path'] or "Playwright bundled Chromium")
        return cls(
            executable_path=options['executable_path'],
            launch_args=options['args'],
            headless=options['headless'],
        )

    def launch_options(self) -> Dict[str, Any]:
        options = {'args': self.launch_args, 'headless': self.headless}
        if self.executable_path:
            options['executable_path'] = self.executable_path
        return options

    def render(self, markup: str) -> bytes:
        """Return the first page of ``markup`` as PDF bytes.

        Raises:
            RenderingError: the browser failed to launch, load or print.
        """
        started = time.monotonic()
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(**self.launch_options())
                try:
                    page = browser.new_page()
                    page.set_content(markup, timeout=self.timeout_ms)
                    pdf_bytes = page.pdf(format=self.page_format, page_ranges=self.page_ranges)
                    page.close()
                finally:
                    browser.close()
        except Exception as e:
            logger.error("PDF rendering failed: %s", e, exc_info=True)
            raise RenderingError(details=str(e)) from e

        logger.info("Rendered PDF (%d bytes) in %.2fs", len(pdf_bytes), time.monotonic() - started)
        return pdf_bytes
