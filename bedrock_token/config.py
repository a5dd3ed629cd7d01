"""Configuration for the bedrock-token command line tool."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class TokenConfig:
    """Settings read from the environment (and an optional .env file)."""

    aws_region: str = "us-west-2"
    profile_name: Optional[str] = None

    # OpenTelemetry configuration
    otel_endpoint: str = ""
    otel_console_export: bool = False

    @classmethod
    def from_env(cls) -> "TokenConfig":
        """Load configuration from environment variables."""
        load_dotenv()
        return cls(
            aws_region=(
                os.getenv("AWS_REGION")
                or os.getenv("AWS_DEFAULT_REGION")
                or cls.aws_region
            ),
            profile_name=os.getenv("AWS_PROFILE") or None,
            otel_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", ""),
            otel_console_export=os.getenv("OTEL_CONSOLE_EXPORT", "").lower() == "true",
        )
