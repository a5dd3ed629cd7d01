"""
Command line entry point that prints a Bedrock bearer token.

Usage:
    bedrock-token
    bedrock-token --region us-east-1
    bedrock-token --profile my-profile --verbose

Credentials come from the boto3 default chain:
    - Environment variables (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY)
    - AWS credentials file (~/.aws/credentials)
    - IAM role (when running on EC2/Lambda/ECS)
    - AWS profile (--profile option)
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .auth import get_aws_credentials
from .config import TokenConfig
from .errors import TokenGenerationError
from .generator import TOKEN_EXPIRES_IN, BedrockTokenGenerator
from .tracing import init_tracing

logger = logging.getLogger(__name__)


def build_parser(config: TokenConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bedrock-token",
        description=(
            "Generate a short-lived Amazon Bedrock bearer token "
            f"(valid for {TOKEN_EXPIRES_IN // 3600} hours)."
        ),
    )
    parser.add_argument(
        "--region",
        default=config.aws_region,
        help=f"AWS region to scope the token to (default: {config.aws_region})",
    )
    parser.add_argument(
        "--profile",
        default=config.profile_name,
        help="AWS profile name to load credentials from",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = TokenConfig.from_env()
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if config.otel_endpoint or config.otel_console_export:
        init_tracing(
            otlp_endpoint=config.otel_endpoint or None,
            enable_console_export=config.otel_console_export,
        )

    try:
        credentials = get_aws_credentials(args.profile)
        token = BedrockTokenGenerator().get_token(credentials, args.region)
    # ValueError covers credential resolution failures
    except (TokenGenerationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
