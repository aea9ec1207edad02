from __future__ import annotations

import argparse
import sys

from MdToPdf.Assets import (
    DEFAULT_CSS_SENTINEL,
    DEFAULT_JS_SENTINEL,
    PageAssets,
    resolve_css,
    resolve_js,
)
from MdToPdf.Pipeline import convert
from MdToPdf.PdfRenderer import DEFAULT_ENGINE, ENGINES, PdfRenderError, get_printing_service


def build_parser() -> argparse.ArgumentParser:
    # Both "-flag" and "--flag" spellings are accepted.
    parser = argparse.ArgumentParser(
        prog="md2pdf",
        description="Render a Markdown file to <name>.html and <name>.pdf next to it.",
        allow_abbrev=False,
    )
    parser.add_argument("markdown_file", nargs="?", help="the Markdown file to render")
    parser.add_argument(
        "-cssFile", "--cssFile", dest="css_file", default=DEFAULT_CSS_SENTINEL,
        help="the CSS file to apply",
    )
    parser.add_argument(
        "-nocss", "--nocss", dest="no_css", action="store_true",
        help="if set, don't apply any CSS",
    )
    parser.add_argument(
        "-showcss", "--showcss", dest="show_css", action="store_true",
        help="if set, print the final CSS to the screen and exit",
    )
    parser.add_argument(
        "-jsFile", "--jsFile", dest="js_file", default=DEFAULT_JS_SENTINEL,
        help="the JS file to apply",
    )
    parser.add_argument(
        "-nojs", "--nojs", dest="no_js", action="store_true",
        help="if set, don't apply any JS",
    )
    parser.add_argument(
        "-showjs", "--showjs", dest="show_js", action="store_true",
        help="if set, print the JS to the screen and exit",
    )
    parser.add_argument(
        "-noscript", "--noscript", dest="no_script", action="store_true",
        help="if set, leave the <script> element out of the page entirely",
    )
    parser.add_argument(
        "-engine", "--engine", choices=sorted(ENGINES), default=DEFAULT_ENGINE,
        help=f"the PDF engine to print with (default: {DEFAULT_ENGINE})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        css = resolve_css(args.css_file, args.no_css)
        if args.show_css:
            print(f"Here's the CSS that will be used:\n\n{css}")
            return 0

        js = resolve_js(args.js_file, args.no_js)
        if args.show_js:
            print(f"Here's the JS that will be used:\n\n{js}")
            return 0

        if not args.markdown_file:
            parser.print_help(sys.stderr)
            print("\tpositional arg: <markdownFile>")
            return 1

        result = convert(
            args.markdown_file,
            PageAssets(css=css, js=js),
            get_printing_service(args.engine),
            include_script=not args.no_script,
        )
    except (OSError, PdfRenderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Rendered {args.markdown_file} -> {result.html_path}, {result.pdf_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
