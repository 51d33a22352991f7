"""Configuration module for atlassian-adf."""

from dataclasses import dataclass
from typing import Literal, cast

from .utils.env import getenv, is_env_truthy

OutputFormat = Literal["text", "markdown", "extract"]
OUTPUT_FORMATS: tuple[str, ...] = ("text", "markdown", "extract")


@dataclass
class ADFConfig:
    """Rendering and logging configuration."""

    output_format: OutputFormat = "text"  # Renderer used by the CLI
    log_level: str = "WARNING"  # Level for the atlassian-adf logger
    log_to_file: bool = False  # Whether to add a rotating file handler
    log_dir: str | None = None  # Directory for the log file

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None) -> "ADFConfig":
        """Create configuration from environment variables.

        Args:
            env: Optional mapping consulted before the process environment

        Returns:
            ADFConfig with values from environment variables

        Raises:
            ValueError: If ADF_OUTPUT_FORMAT is not a supported format
        """
        env = env or {}

        output_format = (getenv(env, "ADF_OUTPUT_FORMAT", "text") or "text").lower()
        if output_format not in OUTPUT_FORMATS:
            msg = (
                f"Unsupported ADF_OUTPUT_FORMAT '{output_format}', "
                f"expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
            raise ValueError(msg)

        log_level = (getenv(env, "ADF_LOG_LEVEL", "WARNING") or "WARNING").upper()

        if "ADF_LOG_TO_FILE" in env:
            log_to_file = env["ADF_LOG_TO_FILE"].lower() in ("true", "1", "yes")
        else:
            log_to_file = is_env_truthy("ADF_LOG_TO_FILE")

        return cls(
            output_format=cast(OutputFormat, output_format),
            log_level=log_level,
            log_to_file=log_to_file,
            log_dir=getenv(env, "ADF_LOG_DIR"),
        )
