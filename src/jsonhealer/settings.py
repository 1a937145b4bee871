"""Server settings loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonhealer.limits import DEFAULT_MAX_DOCUMENT_SIZE
from jsonhealer.parser.scanner import DEFAULT_MAX_DEPTH


class Settings(BaseSettings):
    """Configuration shared by ``jsonhealer-api`` and ``jsonhealer-mcp``.

    Every field can be set through an upper-cased environment variable
    (``MAX_DOCUMENT_SIZE=100000``) or a ``.env`` file next to the process.
    The core library never reads it; callers pass ``HealerOptions`` directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Healing
    log_level: str = "INFO"
    default_preset: str = "default"
    max_document_size: int = Field(default=DEFAULT_MAX_DOCUMENT_SIZE, ge=1)
    max_nesting_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)

    # REST API
    api_server_host: str = "localhost"
    api_server_port: int = 8000
    port: int | None = None  # PORT from the hosting platform wins over api_server_port
    document_body_limit_mb: int = Field(default=5, ge=1)
    default_body_limit_mb: int = Field(default=1, ge=1)

    # MCP
    mcp_transport: Literal["stdio", "http", "sse"] = "stdio"
    mcp_server_host: str = "localhost"
    mcp_server_port: int = 9000

    @property
    def effective_port(self) -> int:
        """Port the REST API binds to."""
        return self.api_server_port if self.port is None else self.port
