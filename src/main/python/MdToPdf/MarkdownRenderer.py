from __future__ import annotations

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

EXTENSIONS = [
    "extra",
    "sane_lists",
    "toc",
    "pymdownx.tilde",
    "pymdownx.magiclink",
]


class TargetBlankTreeprocessor(Treeprocessor):
    """Forces every link to open in a new browsing context."""

    def run(self, root):
        for anchor in root.iter("a"):
            anchor.set("target", "_blank")


class TargetBlankExtension(Extension):
    def extendMarkdown(self, md):
        # Below "inline" (priority 20) so links created from inline syntax exist.
        md.treeprocessors.register(TargetBlankTreeprocessor(md), "target_blank", 5)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def render(markdown_text: str) -> str:
    """
    Converts Markdown to an HTML fragment (no <html>/<body> wrapper).

    A new Markdown instance is built per call so that heading id
    de-duplication state does not carry over between documents.
    """
    md = markdown.Markdown(
        extensions=[*EXTENSIONS, TargetBlankExtension()],
        output_format="html5",
    )
    return md.convert(normalize_newlines(markdown_text))
