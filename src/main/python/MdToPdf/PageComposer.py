from __future__ import annotations

import html
from pathlib import Path


def _script_block(js: str) -> str:
    return f"""        <script>
{js}
        </script>
"""


def compose(
    title: str,
    fragment: str,
    css: str = "",
    js: str = "",
    include_script: bool = True,
) -> str:
    """
    Wraps a rendered fragment in the page template.

    Only the title is escaped; the fragment, CSS and JS are trusted and
    inserted as-is. The <style> element is always emitted, even when empty.
    The <script> element is emitted (possibly empty) unless
    `include_script` is false, in which case it is left out entirely.
    """
    script = _script_block(js) if include_script else ""
    return f"""
<!DOCTYPE html>
<html lang="en">
    <head>
        <meta charset="UTF-8">
        <title>{html.escape(title)}</title>
{script}        <style>
{css}
        </style>
    </head>
    <body>
        <div id="resume">
            {fragment}
        </div>
    </body>
</html>"""


def write_page(path: str | Path, document: str) -> Path:
    """Writes the document as UTF-8, replacing any existing file."""
    output_path = Path(path).resolve()
    output_path.write_text(document, encoding="utf-8")
    return output_path
