"""Network configuration constants for the local preview server."""

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8765
PREVIEW_POLL_INTERVAL_MS: int = 1500
