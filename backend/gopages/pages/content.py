"""
GoPages — Redirect page layout and HTML rendering.

Each page answers `go get` with a go-import meta tag pointing at the GitHub
repository, and sends browsers on to pkg.go.dev.

Layout:
  <pages_dir>/<module path tail>/<suffix>/index.html
"""

from __future__ import annotations

import html
import posixpath
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from gopages.pages.prefix import parse_import_path

PKG_GO_DEV = "https://pkg.go.dev"
INDEX_FILE = "index.html"

_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="go-import" content="{go_import}">
    <meta http-equiv="refresh" content="0; url={doc_url}">
  </head>
  <body>
    Redirecting to <a href="{doc_url}">{doc_url_text}</a>...
  </body>
</html>
"""


class TemplateConfig(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    import_prefix: str = Field(min_length=1)
    owner: str = Field(min_length=1)
    repo_name: str = Field(min_length=1)

    @property
    def repo_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo_name}.git"

    @property
    def go_import(self) -> str:
        return f"{self.import_prefix} git {self.repo_url}"

    @property
    def doc_url(self) -> str:
        return f"{PKG_GO_DEV}/{self.import_prefix}"


@dataclass(frozen=True)
class RedirectPage:
    directory_path: str
    file_path: str
    content: str


def module_path_tail(module_path: str) -> str:
    """example.com/abc/def -> /abc/def ("" for a bare host)."""
    path = parse_import_path(module_path).path
    return "" if path == "/" else path


def generate_file_paths(pages_dir: str, module_tail: str, suffix: str) -> tuple[str, str]:
    """Return (directory_path, file_path) for one page, normalised and relative to cwd."""
    directory_path = posixpath.normpath(
        posixpath.join(pages_dir, module_tail.lstrip("/"), suffix)
    )
    return directory_path, posixpath.join(directory_path, INDEX_FILE)


def render_template(config: TemplateConfig) -> str:
    return _TEMPLATE.format(
        go_import=html.escape(config.go_import, quote=True),
        doc_url=html.escape(config.doc_url, quote=True),
        doc_url_text=html.escape(config.doc_url, quote=False),
    )


def build_page(pages_dir: str, module_tail: str, suffix: str, content: str) -> RedirectPage:
    directory_path, file_path = generate_file_paths(pages_dir, module_tail, suffix)
    return RedirectPage(directory_path=directory_path, file_path=file_path, content=content)
