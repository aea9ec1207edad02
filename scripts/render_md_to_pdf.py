#!/usr/bin/env python3
"""
Render Markdown to a styled HTML page and PDF using Python-Markdown and a
headless Chromium (or WeasyPrint).

Usage:
  .venv/bin/python scripts/render_md_to_pdf.py [flags] input.md
  .venv/bin/python scripts/render_md_to_pdf.py --showcss
"""

from __future__ import annotations

from MdToPdf.Cli import main


if __name__ == "__main__":
    raise SystemExit(main())
