"""Removal of generated tag clouds and cached downloads."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from send2trash import send2trash  # type: ignore[import-untyped]

from .config import URL_CACHE_DIR_NAME, CloudConfig


@dataclass
class CleanResult:
    """Result of cleaning a single path."""

    path: Path
    success: bool
    error: str | None = None
    action: Literal["trashed", "deleted", "skipped"] = "skipped"


def get_cleanable_paths(
    config: CloudConfig,
    output: Path | None = None,
    include_cache: bool = True,
) -> list[tuple[str, Path, bool]]:
    """Get list of paths that would be cleaned.

    Args:
        config: Tag cloud configuration.
        output: Generated HTML file, if any.
        include_cache: Whether to include the download cache directory.

    Returns:
        List of tuples (name, path, exists) for each cleanable path.
    """
    paths: list[tuple[str, Path, bool]] = []

    if output is not None:
        paths.append(("output", output, output.exists()))

    if include_cache:
        cache_dir = config.get_cache_dir()
        paths.append((URL_CACHE_DIR_NAME, cache_dir, cache_dir.exists()))

    return paths


def clean_outputs(
    config: CloudConfig,
    output: Path | None = None,
    permanent: bool = False,
    include_cache: bool = True,
) -> list[CleanResult]:
    """Clean generated output and cached downloads.

    Args:
        config: Tag cloud configuration.
        output: Generated HTML file, if any.
        permanent: If True, permanently delete files. If False, move to trash.
        include_cache: Whether to include the download cache directory.

    Returns:
        List of CleanResult objects describing what happened to each path.
    """
    results: list[CleanResult] = []

    for name, path, exists in get_cleanable_paths(config, output, include_cache):
        if not exists:
            results.append(CleanResult(path=path, success=True, action="skipped"))
            continue

        if name == URL_CACHE_DIR_NAME and _contains_base_dir(path, config):
            error = f"Refusing to remove {path}: it contains {config.base_dir}"
            results.append(CleanResult(path=path, success=False, error=error))
            continue

        try:
            if permanent:
                _delete_path(path)
                results.append(CleanResult(path=path, success=True, action="deleted"))
            else:
                send2trash(str(path))
                results.append(CleanResult(path=path, success=True, action="trashed"))
        except Exception as e:
            results.append(CleanResult(path=path, success=False, error=str(e)))

    return results


def _contains_base_dir(path: Path, config: CloudConfig) -> bool:
    """Check if removing ``path`` would also remove the config base directory."""
    return config.base_dir.resolve().is_relative_to(path.resolve())


def _delete_path(path: Path) -> None:
    """Permanently delete a path (file or directory)."""
    if path.is_dir():
        shutil.rmtree(path)
    else:
        path.unlink()
