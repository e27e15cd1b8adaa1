"""Fetching text inputs given as URLs."""

import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests

from .core.errors import TagCloudIOError

log = logging.getLogger(__name__)

# Default timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

# Default headers for HTTP requests
DEFAULT_HEADERS = {
    "User-Agent": "tagcloud/1.0 (Tag cloud generator)",
}


def is_url(path: str) -> bool:
    """Check if a path is an HTTP/HTTPS URL."""
    return path.startswith("http://") or path.startswith("https://")


def get_url_filename(url: str) -> str:
    """Extract filename from URL, or 'download' if the path is empty."""
    parsed = urlparse(url)
    path = parsed.path.rstrip("/")
    if path:
        return Path(path).name
    return "download"


def get_cache_path(url: str, cache_dir: Path) -> Path:
    """Get deterministic cache path for a URL.

    Args:
        url: The URL to cache.
        cache_dir: Directory to store cached files.

    Returns:
        Path combining a hash of the URL with its original filename.
    """
    url_hash = hashlib.sha256(url.encode()).hexdigest()[:16]
    return cache_dir / f"{url_hash}_{get_url_filename(url)}"


@dataclass
class UrlCacheResult:
    """Result of downloading and caching a URL."""

    success: bool
    local_path: Path | None
    error: str | None = None
    from_cache: bool = False


def download_url(
    url: str,
    cache_dir: Path,
    timeout: int = DEFAULT_TIMEOUT,
    force: bool = False,
) -> UrlCacheResult:
    """Download a URL and cache it locally.

    Args:
        url: The URL to download.
        cache_dir: Directory to store cached files.
        timeout: Request timeout in seconds.
        force: If True, re-download even if cached.

    Returns:
        UrlCacheResult with success status and local path.
    """
    cache_path = get_cache_path(url, cache_dir)

    if not force and cache_path.exists():
        log.debug(f"Using cached copy of {url}: {cache_path}")
        return UrlCacheResult(success=True, local_path=cache_path, from_cache=True)

    try:
        cache_dir.mkdir(parents=True, exist_ok=True)

        response = requests.get(url, timeout=timeout, stream=True, headers=DEFAULT_HEADERS)
        response.raise_for_status()

        with open(cache_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)

        log.info(f"Downloaded {url} -> {cache_path}")
        return UrlCacheResult(success=True, local_path=cache_path)

    except (requests.RequestException, OSError) as e:
        # Drop a partially written file so it is not mistaken for a cached copy
        try:
            cache_path.unlink(missing_ok=True)
        except OSError:
            log.warning(f"Could not remove partial download {cache_path}")
        return UrlCacheResult(success=False, local_path=None, error=str(e))


def ensure_url_downloaded(url: str, cache_dir: Path) -> Path:
    """Download URL if needed and return local path.

    Raises:
        TagCloudIOError: If download fails.
    """
    result = download_url(url, cache_dir)
    if not result.success or result.local_path is None:
        raise TagCloudIOError(url, f"Failed to download: {result.error}")
    return result.local_path
