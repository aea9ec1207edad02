from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CSS_SENTINEL = "default.css"
DEFAULT_JS_SENTINEL = "default.js"

DEFAULT_CSS = """
@page {
  size: Letter;
  margin: 0.6in 0.7in;
}
html {
  font-size: 10.5pt;
}
body {
  font-family: "Helvetica Neue", Arial, "Liberation Sans", sans-serif;
  color: #222;
  line-height: 1.45;
  margin: 0;
}
#resume {
  max-width: 7.5in;
  margin: 0 auto;
}
#resume > h1:first-child {
  font-size: 2.2rem;
  font-weight: 300;
  letter-spacing: 0.04em;
  text-align: center;
  margin: 0 0 0.1rem;
}
#resume > h1:first-child + p {
  text-align: center;
  color: #555;
  margin-top: 0;
}
h2 {
  font-size: 1.15rem;
  text-transform: uppercase;
  letter-spacing: 0.08em;
  color: #1d4e89;
  border-bottom: 1px solid #1d4e89;
  margin: 1.2rem 0 0.5rem;
  break-after: avoid;
}
h3 {
  font-size: 1rem;
  margin: 0.8rem 0 0.2rem;
  break-after: avoid;
}
h3 + p em {
  color: #666;
}
ul {
  padding-left: 1.2rem;
  margin: 0.2rem 0 0.6rem;
}
li {
  margin-bottom: 0.15rem;
  break-inside: avoid;
}
a {
  color: #1d4e89;
  text-decoration: none;
}
del {
  color: #888;
}
dl dt {
  font-weight: bold;
  float: left;
  clear: left;
  width: 9rem;
}
dl dd {
  margin-left: 9.5rem;
}
code, pre {
  font-family: "DejaVu Sans Mono", Menlo, monospace;
  font-size: 0.9em;
}
table {
  border-collapse: collapse;
  width: 100%;
}
td, th {
  padding: 0.2rem 0.4rem;
  border-bottom: 1px solid #ddd;
  text-align: left;
}
"""

DEFAULT_JS = """
document.addEventListener("DOMContentLoaded", function () {
  document.querySelectorAll('a[target="_blank"]').forEach(function (link) {
    link.setAttribute("rel", "noopener noreferrer");
  });
});
"""


def resolve_asset(path: str, sentinel: str, default: str, suppressed: bool) -> str:
    """
    Picks exactly one source for an asset: nothing when suppressed, the
    built-in text when `path` is the sentinel name, otherwise the file.
    Raises OSError if the file cannot be read.
    """
    if suppressed:
        return ""
    if path == sentinel:
        return default
    return Path(path).read_text(encoding="utf-8")


@dataclass(frozen=True)
class PageAssets:
    css: str = ""
    js: str = ""


def resolve_css(css_file: str = DEFAULT_CSS_SENTINEL, no_css: bool = False) -> str:
    return resolve_asset(css_file, DEFAULT_CSS_SENTINEL, DEFAULT_CSS, no_css)


def resolve_js(js_file: str = DEFAULT_JS_SENTINEL, no_js: bool = False) -> str:
    return resolve_asset(js_file, DEFAULT_JS_SENTINEL, DEFAULT_JS, no_js)
