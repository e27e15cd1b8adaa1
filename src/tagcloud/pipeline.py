"""End-to-end tag cloud generation: read, count, select, sort, render."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import CloudConfig
from .core.counter import count_file
from .core.errors import TagCloudIOError
from .core.ordering import sort_alphabetically
from .core.selector import Selection, select_top
from .render import render_html
from .url import ensure_url_downloaded, is_url

log = logging.getLogger(__name__)


@dataclass
class CloudResult:
    """Everything produced by one tag cloud run.

    Attributes:
        source: Input path or URL as given by the caller.
        counts: Word counts for the whole input.
        selection: Selected words in alphabetical order.
        html: Rendered HTML document.
    """

    source: str
    counts: dict[str, int]
    selection: Selection
    html: str


def resolve_source(source: str | Path, config: CloudConfig) -> Path:
    """Resolve an input to a local file, downloading URLs into the cache.

    Relative paths are taken as given so they match what the user typed.
    """
    source_str = str(source)
    if is_url(source_str):
        return ensure_url_downloaded(source_str, config.get_cache_dir())
    return Path(source_str)


def load_counts(source: str | Path, config: CloudConfig | None = None) -> dict[str, int]:
    """Count the words of an input file or URL."""
    config = config or CloudConfig()
    path = resolve_source(source, config)
    return count_file(path, config.separator_set(), config.encoding)


def build_cloud(
    source: str | Path,
    n: int,
    config: CloudConfig | None = None,
    counts: dict[str, int] | None = None,
) -> CloudResult:
    """Build a tag cloud for the ``n`` most frequent words of ``source``.

    Args:
        source: Input file path or URL.
        n: Number of words, ``0 <= n <= distinct words``.
        config: Settings, defaults if omitted.
        counts: Precomputed counts for ``source``, to skip reading it again.

    Returns:
        CloudResult holding counts, the alphabetical selection and the HTML.

    Raises:
        TagCloudIOError: If the input cannot be read.
        InvalidWordCountError: If ``n`` is out of range.
    """
    config = config or CloudConfig()
    if counts is None:
        counts = load_counts(source, config)

    selection = sort_alphabetically(select_top(counts, n))
    html = render_html(
        selection,
        str(source),
        n,
        stylesheet=config.stylesheet,
        font_range=config.font_range,
    )
    log.debug(
        f"Selected {len(selection)} of {len(counts)} words "
        f"(counts {selection.min_count}..{selection.max_count})"
    )
    return CloudResult(source=str(source), counts=counts, selection=selection, html=html)


def write_html(html: str, output: Path) -> None:
    """Write a rendered document, reporting failures as TagCloudIOError."""
    try:
        with open(output, "w", encoding="utf-8") as f:
            f.write(html)
    except OSError as e:
        raise TagCloudIOError(output, f"Error writing to file: {e}") from e


def generate_tag_cloud(
    source: str | Path,
    output: Path,
    n: int,
    config: CloudConfig | None = None,
    counts: dict[str, int] | None = None,
) -> CloudResult:
    """Build a tag cloud and write it to ``output``.

    The output file is only opened once the whole document has been rendered,
    so an unreadable input or invalid ``n`` never leaves a partial file.
    """
    result = build_cloud(source, n, config, counts)
    write_html(result.html, output)
    log.info(f"Wrote top {n} words in {source} -> {output}")
    return result
