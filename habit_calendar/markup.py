"""
描画結果の要素ツリー

createEl / createDiv と同じ感覚で組み立て, to_html() で HTML 文字列にする.
text は必ずエスケープされる. 生の HTML は set_html() で渡したものだけ.
"""
from dataclasses import dataclass, field

from markupsafe import Markup, escape


@dataclass
class Element:
    tag: str
    cls: str = ""
    attrs: dict = field(default_factory=dict)
    text: str | None = None
    children: list = field(default_factory=list)
    html: Markup | None = None

    def create_el(self, tag: str, cls: str = "", text: str | None = None, attrs: dict | None = None) -> "Element":
        child = Element(tag, cls=cls, attrs=dict(attrs or {}), text=text)
        self.children.append(child)
        return child

    def create_div(self, cls: str = "", text: str | None = None, attrs: dict | None = None) -> "Element":
        return self.create_el("div", cls=cls, text=text, attrs=attrs)

    def append(self, child: "Element") -> "Element":
        self.children.append(child)
        return child

    def set_html(self, html) -> None:
        self.html = Markup(html)

    @property
    def classes(self) -> list[str]:
        return self.cls.split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def iter(self, tag: str | None = None):
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)

    def find_all(self, cls: str) -> list["Element"]:
        return [el for el in self.iter() if el.has_class(cls)]

    def to_html(self) -> Markup:
        attrs = {"class": self.cls, **self.attrs} if self.cls else dict(self.attrs)
        parts = [Markup("<{}").format(Markup(self.tag))]
        for key, value in attrs.items():
            parts.append(Markup(' {}="{}"').format(Markup(key), value))
        parts.append(Markup(">"))
        if self.text is not None:
            parts.append(escape(self.text))
        if self.html is not None:
            parts.append(self.html)
        parts.extend(child.to_html() for child in self.children)
        parts.append(Markup("</{}>").format(Markup(self.tag)))
        return Markup("").join(parts)

    def __html__(self) -> str:
        return self.to_html()
