import logging

from markupsafe import Markup

from .context import build_context
from .errors import HabitCalendarError
from .geometry import DAYS_PER_WEEK, weekday_labels
from .markdown_render import MarkdownRenderer
from .markup import Element
from .model import FORMAT_HTML, FORMAT_MARKDOWN, RenderContext
from .normalize import normalize
from .settings import Settings

logger = logging.getLogger(__name__)


def render_head(ctx: RenderContext) -> Element:
    thead = Element("thead")

    if ctx.settings.display_head:
        tr = thead.create_el("tr")
        tr.create_el("th", cls="habitt-head", text=ctx.display_month, attrs={"colspan": DAYS_PER_WEEK})

    tr = thead.create_el("tr")
    for i, label in enumerate(weekday_labels(ctx.settings)):
        tr.create_el("th", cls=f"habitt-th habitt-th-{i}", text=label)
    return thead


def render_content(dots: Element, content: str, ctx: RenderContext, markdown_renderer) -> None:
    settings = ctx.settings
    if settings.enable_html and ctx.format == FORMAT_HTML:
        # HTML としてそのまま差し込む. enable_html は利用者が明示的に有効にしたときだけ
        dots.set_html(Markup("<div>{}</div>").format(Markup(content)))
        return

    if settings.enable_markdown and ctx.format == FORMAT_MARKDOWN:
        try:
            html = markdown_renderer.render(content, ctx.filepath)
        except Exception:
            logger.exception("markdown rendering failed for %r, falling back to text", ctx.filepath)
        else:
            dots.create_div().set_html(html)
            return

    dots.create_div(cls="habit-content", text=content)


def render_day(tr: Element, day: int, ctx: RenderContext, markdown_renderer) -> Element:
    entry = ctx.day_to_entry.get(day) if day else None
    checked = entry is not None

    cls = f"habitt-td habitt-td--{day or 'disabled'}"
    if checked:
        cls += " habitt-td--checked"
    td = tr.create_el("td", cls=cls)
    div = td.create_div(cls="habitt-c")

    if checked:
        # link が空なら日付文字列をそのまま使う (互換のため. 有効なリンクとは限らない)
        link = entry.link or entry.date
        day_div = div.create_div(cls="habitt-date")
        day_div.create_el(
            "a",
            cls="internal-link",
            text=str(day),
            attrs={"href": link, "data-href": link, "target": "_blank", "rel": "noopener"},
        )
    else:
        div.create_div(cls="habitt-date", text=str(day) if day else "")

    dots = div.create_div(cls="habitt-dots")
    if checked:
        render_content(dots, entry.content, ctx, markdown_renderer)
    return td


def render_body(ctx: RenderContext, markdown_renderer) -> Element:
    tbody = Element("tbody")
    for week in ctx.weeks:
        tr = tbody.create_el("tr")
        for day in week:
            render_day(tr, day, ctx, markdown_renderer)
    return tbody


def render_error(message: str) -> Element:
    return Element("div", cls="habitt-error", text=message)


def render(ctx: RenderContext, markdown_renderer=None) -> Element:
    if ctx.error:
        return render_error(ctx.error)

    if markdown_renderer is None:
        markdown_renderer = MarkdownRenderer()

    attrs = {"style": f"width: {ctx.table_width};"} if ctx.table_width else {}
    table = Element("table", cls="habitt", attrs=attrs)
    table.append(render_head(ctx))
    table.append(render_body(ctx, markdown_renderer))
    return table


def render_calendar(params, settings: Settings | None = None, markdown_renderer=None) -> Element:
    """
    params (CalendarRequest の形の dict) からカレンダーを描画する
    失敗はエラー表示の要素として返し, 例外は投げない
    """
    settings = settings or Settings()
    try:
        calendar_data = normalize(params)
    except HabitCalendarError as exc:
        logger.warning("invalid calendar request: %s", exc)
        return render_error(f"Fail: {exc}")

    ctx = build_context(calendar_data, settings)
    return render(ctx, markdown_renderer)
