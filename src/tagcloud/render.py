"""HTML rendering of a tag cloud."""

from html import escape

from .core.scale import MAX_FONT_SIZE, MIN_FONT_SIZE, font_size
from .core.selector import Selection

# Stylesheet defining the f11..f48 font classes
DEFAULT_STYLESHEET = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css"
)


def render_word(word: str, count: int, size: int) -> str:
    """Render a single word as a sized span."""
    return (
        f'<span style="cursor:default" class="f{size}" '
        f'title="count: {count}">{escape(word)}</span>'
    )


def render_html(
    selection: Selection,
    source_name: str,
    n: int,
    stylesheet: str = DEFAULT_STYLESHEET,
    font_range: tuple[int, int] = (MIN_FONT_SIZE, MAX_FONT_SIZE),
) -> str:
    """Render a selection as a complete HTML page.

    Words are emitted in the order they appear in ``selection``; callers sort
    them alphabetically first.

    Args:
        selection: Words to render with their count bounds.
        source_name: Input name shown in the title and heading.
        n: Number of words requested, shown in the title and heading.
        stylesheet: URL of the stylesheet defining the font classes.
        font_range: Smallest and largest font class.

    Returns:
        The HTML document, newline terminated.
    """
    low, high = font_range
    heading = f"Top {n} words in {escape(source_name)}"

    lines = [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
        f'<link href="{escape(stylesheet)}" rel="stylesheet" type="text/css">',
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    for word, count in selection:
        size = font_size(count, selection.min_count, selection.max_count, low, high)
        lines.append(render_word(word, count, size))
    lines.extend(["</p>", "</div>", "</body>", "</html>"])

    return "\n".join(lines) + "\n"
