from __future__ import annotations

import re

# The character after the leading "#" is consumed even when it is not
# whitespace, so "#Title" yields "itle". \s is ASCII-only: a non-breaking
# space after "# " stays part of the title.
_TITLE_RE = re.compile(r"^#[^#]\s*(.*)", re.MULTILINE | re.ASCII)


def extract_title(markdown_text: str) -> str:
    """
    Returns the text of the first top-level heading, or "" if there is none.
    The scan is textual: headings inside fenced code are not skipped.
    """
    match = _TITLE_RE.search(markdown_text)
    if match is None:
        return ""
    return match.group(1)
