from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol


class PdfRenderError(Exception):
    """The rendering engine failed to launch, navigate or print."""


class PdfPrintingService(Protocol):
    def print_to_pdf(self, url: str) -> bytes:
        ...


class ChromiumPrintingService:
    """
    Prints a page with a headless Chromium driven by Playwright.

    Every call launches its own browser and closes it before returning,
    whether printing succeeded or not. Background graphics are not printed.
    """

    def __init__(self, launch_args: list[str] | None = None):
        self._launch_args = list(launch_args or [])

    def print_to_pdf(self, url: str) -> bytes:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright

        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=True, args=self._launch_args)
                try:
                    page = browser.new_page()
                    page.goto(url)
                    return page.pdf(print_background=False)
                finally:
                    browser.close()
        except PlaywrightError as e:
            raise PdfRenderError(f"Chromium failed to print {url}: {e}") from e


# WeasyPrint always paints backgrounds; this user stylesheet drops them so
# output matches the Chromium engine with print_background=False.
NO_BACKGROUND_CSS = "* { background: none !important; }"


class WeasyPrintPrintingService:
    """Prints a page with WeasyPrint instead of a browser."""

    def print_to_pdf(self, url: str) -> bytes:
        from weasyprint import CSS, HTML

        try:
            return HTML(url=url).write_pdf(stylesheets=[CSS(string=NO_BACKGROUND_CSS)])
        except Exception as e:
            raise PdfRenderError(f"WeasyPrint failed to print {url}: {e}") from e


ENGINES: dict[str, Callable[[], PdfPrintingService]] = {
    "chromium": ChromiumPrintingService,
    "weasyprint": WeasyPrintPrintingService,
}

DEFAULT_ENGINE = "chromium"


def get_printing_service(name: str = DEFAULT_ENGINE) -> PdfPrintingService:
    try:
        factory = ENGINES[name]
    except KeyError:
        raise ValueError(
            f"Unknown PDF engine: {name!r} (expected one of {', '.join(sorted(ENGINES))})"
        ) from None
    return factory()


def file_url(path: str | Path) -> str:
    return Path(path).resolve().as_uri()


def render_to_pdf(html_path: str | Path, service: PdfPrintingService) -> bytes:
    """Loads the HTML file by its file:// URL and returns the printed PDF bytes."""
    return service.print_to_pdf(file_url(html_path))


def write_pdf(path: str | Path, data: bytes) -> Path:
    output_path = Path(path).resolve()
    output_path.write_bytes(data)
    return output_path
