"""Global state for the preview server."""

from ..config import CloudConfig

# Input shown by the server
source: str | None = None
config: CloudConfig = CloudConfig()

# Word counts of the source, filled on first request
counts: dict[str, int] | None = None


def configure(source_path: str | None = None, cloud_config: CloudConfig | None = None) -> None:
    """Configure the server with an input and settings."""
    global source, config, counts
    source = source_path
    if cloud_config is not None:
        config = cloud_config
    counts = None
