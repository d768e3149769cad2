"""Command line inspection of web client classification."""

import argparse
import json
import logging
import sys
from enum import IntEnum

from web_client.adapters.config import AppConfig
from web_client.adapters.headers import EnvironHeaderSource
from web_client.adapters.signature import build_signature_provider
from web_client.application.client_profile import ClientProfile
from web_client.domain.errors import CollaboratorUnavailableError
from web_client.domain.models.client_snapshot import ClientSnapshot

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _describe(category: IntEnum, name: str, version: str) -> str:
    """Format a category with the label and version it was detected from."""
    label = " ".join(part for part in (name, version) if part)
    return f"{category.name} ({label})" if label else category.name


def format_snapshot(snapshot: ClientSnapshot) -> str:
    """Format a snapshot as human-readable text."""
    lines = [
        f"User agent:      {snapshot.user_agent or '-'}",
        "Platform:        "
        + _describe(snapshot.platform, snapshot.platform_name, snapshot.platform_version),
        "Engine:          "
        + _describe(snapshot.engine, snapshot.engine_name, snapshot.engine_version),
        "Browser:         "
        + _describe(snapshot.browser, snapshot.browser_name, snapshot.browser_version),
        f"Mobile:          {'yes' if snapshot.mobile else 'no'}",
        f"Robot:           {'yes' if snapshot.robot else 'no'}",
        f"Languages:       {', '.join(snapshot.languages) or '-'}",
        f"Encodings:       {', '.join(snapshot.encodings) or '-'}",
    ]
    if snapshot.headers:
        lines.append("Headers:")
        lines.extend(f"  {name}: {value}" for name, value in sorted(snapshot.headers.items()))
    return "\n".join(lines)


def snapshot_to_json(snapshot: ClientSnapshot) -> str:
    """Format a snapshot as JSON, with categories by name."""
    data = snapshot.model_dump(mode="json")
    data["platform"] = snapshot.platform.name
    data["engine"] = snapshot.engine.name
    data["browser"] = snapshot.browser.name
    return json.dumps(data, indent=2, ensure_ascii=False)


def inspect_client(args: argparse.Namespace, config: AppConfig) -> ClientSnapshot:
    """Classify the client described by the command line arguments."""
    profile = ClientProfile(
        args.user_agent,
        args.accept_encoding,
        args.accept_language,
        header_source=EnvironHeaderSource() if args.from_env else None,
        signature_provider=build_signature_provider(config),
        header_prefix=config.header_prefix,
        thread_safe=config.thread_safe_profiles,
    )
    return profile.snapshot()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Web client classification helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify a user agent
  web-client inspect --user-agent "Mozilla/5.0 (X11; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0"

  # Classify a CGI request from its environment
  HTTP_USER_AGENT="curl/8.0" web-client inspect --from-env --json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    inspect_parser = subparsers.add_parser("inspect", help="Classify a web client")
    inspect_parser.add_argument("--user-agent", help="User-Agent header value")
    inspect_parser.add_argument("--accept-encoding", help="Accept-Encoding header value")
    inspect_parser.add_argument("--accept-language", help="Accept-Language header value")
    inspect_parser.add_argument(
        "--from-env",
        action="store_true",
        help="Read omitted values and headers from HTTP_* environment variables",
    )
    inspect_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig().with_toml_overrides()
    configure_logging(config)

    try:
        snapshot = inspect_client(args, config)
    except CollaboratorUnavailableError as e:
        logger.error(f"Client classification failed: {e}")
        return 1

    print(snapshot_to_json(snapshot) if args.json else format_snapshot(snapshot))
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
