"""Configuration management for the Vintage Gallery client.

This module provides configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the
VINTAGE_GALLERY_ prefix, allowing deployment-time customization without
code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (VINTAGE_GALLERY_* prefix)
2. .env file in the working directory
3. Default values defined in GalleryConfig

Example .env file:
    VINTAGE_GALLERY_BACKEND_URL=https://art.example.com
    VINTAGE_GALLERY_SERVER_PORT=7860

Passing Configuration Around
----------------------------
A global `config` instance is created at import time for the CLI entry
point.  The core components never read it directly: the remote store
client, the collection store and the ingestion pipeline each receive a
config object at construction, so tests and embedding applications can
run several independently configured sessions side by side.

Usage Example
-------------
    from vintagegallery.core.config import GalleryConfig

    cfg = GalleryConfig(backend_url="http://localhost:9000")
    client = ArtStoreClient(cfg)
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GalleryConfig(BaseSettings):
    """Main configuration for the Vintage Gallery client.

    Attributes
    ----------
    Remote Store Settings:
        backend_url : str
            Base address of the remote record store.  Treated as an opaque
            prefix prepended to the ``/api/art`` path.
        request_timeout : float | None
            Seconds to wait for the remote store.  ``None`` disables the
            timeout entirely, so a hung store keeps the gallery loading.

    Ingestion Settings:
        fallback_media_type : str
            Media type embedded in encoded images whose type is unknown

    UI Settings:
        server_name : str
            Server bind address for the Gradio UI
        server_port : int
            Server port (1024-65535)
        share : bool
            Create public gradio.live link (keep False for local-only)
        log_level : str
            Root logging level used by the CLI entry point

    Examples
    --------
    Create a custom configuration:

        >>> cfg = GalleryConfig(backend_url="http://store:8000", request_timeout=10)

    Use the global configuration instance:

        >>> from vintagegallery.core.config import config
        >>> print(config.backend_url)
        'http://localhost:8000'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VINTAGE_GALLERY_",
        case_sensitive=False,
    )

    # Remote record store
    backend_url: str = Field(
        default="http://localhost:8000",
        description="Base address of the remote record store",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Remote store timeout in seconds (None = wait indefinitely)",
        gt=0,
    )

    # Image ingestion
    fallback_media_type: str = Field(
        default="application/octet-stream",
        description="Media type used when a file's type cannot be determined",
    )

    # UI settings
    server_name: str = Field(
        default="127.0.0.1",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level for the CLI entry point",
    )

    @property
    def art_url(self) -> str:
        """Full URL of the artwork collection endpoint."""
        return f"{self.backend_url.rstrip('/')}/api/art"


# Global configuration instance, read by the CLI entry point only.
config = GalleryConfig()
