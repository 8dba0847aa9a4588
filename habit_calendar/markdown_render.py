import posixpath
from urllib.parse import urlsplit

import bleach
from markdown import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markupsafe import escape

# サニタイジング
# <img> などはまだ許可していないことに注意

ALLOWED_TAGS = bleach.sanitizer.ALLOWED_TAGS.union({
    "p", "br", "pre", "code", "blockquote",
    "ul", "ol", "li",
    "strong", "em", "del",
    "h1", "h2", "h3", "h4",
    "table", "thead", "tbody", "tr", "th", "td", "a",
    "div", "span", "input",
})
ALLOWED_ATTRS = {
    "a": ["href", "title", "rel"],
    "code": ["class"],
    "span": ["class"],
    "pre": ["class"],
    "div": ["class"],
    "li": ["class"],
    "ul": ["class"],
    "input": ["type", "checked", "disabled"],
}
ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

MARKDOWN_EXTENSIONS = [
    "fenced_code",
    "tables",
    "sane_lists",
    "pymdownx.superfences",
    "pymdownx.highlight",
    "pymdownx.tilde",
    "pymdownx.tasklist",
]
# コードブロックまわり
MARKDOWN_EXTENSION_CONFIGS = {
    "pymdownx.highlight": {
        "use_pygments": True,
        "noclasses": False,
        "css_class": "highlight",
        "linenums": False,
    }
}


def sanitize_html(html: str) -> str:
    cleaned = bleach.clean(
        html,
        tags=list(ALLOWED_TAGS),
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )
    cleaned = bleach.linkify(cleaned)
    return cleaned


def resolve_link(href: str, source_path: str) -> str:
    """
    source_path のあるフォルダを基準に相対リンクを解決する
    スキーム付き, 絶対パス, #アンカーはそのまま
    """
    if not href or not source_path:
        return href
    if urlsplit(href).scheme or href.startswith(("/", "#")):
        return href
    base = posixpath.dirname(source_path)
    return posixpath.normpath(posixpath.join(base, href))


class _RelativeLinkProcessor(Treeprocessor):
    def __init__(self, md, source_path):
        super().__init__(md)
        self.source_path = source_path

    def run(self, root):
        for a in root.iter("a"):
            href = a.get("href")
            if href:
                a.set("href", resolve_link(href, self.source_path))


class SourcePathExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "source_path": ["", "path of the note the markdown comes from"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.treeprocessors.register(
            _RelativeLinkProcessor(md, self.getConfig("source_path")),
            "habit_relative_links",
            5,
        )


class MarkdownRenderer:
    """Markdown -> サニタイズ済み HTML"""

    def __init__(self, extensions=None, extension_configs=None):
        self.extensions = list(MARKDOWN_EXTENSIONS if extensions is None else extensions)
        self.extension_configs = dict(
            MARKDOWN_EXTENSION_CONFIGS if extension_configs is None else extension_configs
        )

    def render(self, content: str, source_path: str = "") -> str:
        raw_html = markdown(
            content,
            extensions=[*self.extensions, SourcePathExtension(source_path=source_path)],
            extension_configs=self.extension_configs,
        )
        return sanitize_html(raw_html)


class NullMarkdownRenderer:
    """Markdown を解釈せず, エスケープしたテキストを返す"""

    def render(self, content: str, source_path: str = "") -> str:
        return str(escape(content))
