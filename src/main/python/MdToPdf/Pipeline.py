from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from MdToPdf.Assets import PageAssets
from MdToPdf.MarkdownRenderer import normalize_newlines, render
from MdToPdf.PageComposer import compose, write_page
from MdToPdf.PdfRenderer import PdfPrintingService, render_to_pdf, write_pdf
from MdToPdf.TitleExtractor import extract_title


@dataclass(frozen=True)
class ConversionResult:
    html_path: Path
    pdf_path: Path


def output_paths(markdown_path: str | Path) -> tuple[Path, Path]:
    """
    Derives the HTML and PDF paths next to the input by dropping its last
    extension: "notes/cv.md" -> ("notes/cv.html", "notes/cv.pdf").
    """
    path = Path(markdown_path)
    base = path.with_suffix("")
    return (
        base.with_name(base.name + ".html"),
        base.with_name(base.name + ".pdf"),
    )


def markdown_to_html(
    markdown_path: str | Path,
    html_path: str | Path,
    assets: PageAssets,
    include_script: bool = True,
) -> Path:
    source = normalize_newlines(Path(markdown_path).resolve().read_text(encoding="utf-8"))
    document = compose(
        extract_title(source),
        render(source),
        css=assets.css,
        js=assets.js,
        include_script=include_script,
    )
    return write_page(html_path, document)


def html_to_pdf(
    html_path: str | Path,
    pdf_path: str | Path,
    service: PdfPrintingService,
) -> Path:
    return write_pdf(pdf_path, render_to_pdf(html_path, service))


def convert(
    markdown_path: str | Path,
    assets: PageAssets,
    service: PdfPrintingService,
    include_script: bool = True,
) -> ConversionResult:
    """Markdown file -> HTML file -> PDF file. Any error propagates."""
    html_path, pdf_path = output_paths(markdown_path)
    html_path = markdown_to_html(markdown_path, html_path, assets, include_script)
    pdf_path = html_to_pdf(html_path, pdf_path, service)
    return ConversionResult(html_path=html_path, pdf_path=pdf_path)
