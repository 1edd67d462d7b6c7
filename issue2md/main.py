"""issue2md entry point.

Fetches a GitHub issue, pull request or discussion and writes it as Markdown.
Usage: issue2md [options] URL [OUTPUT_FILE]
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from issue2md import __version__
from issue2md.adapters import GitHubAdapter
from issue2md.config import AppConfig, load_config
from issue2md.errors import Issue2MDError
from issue2md.logging import Issue2MDLogging
from issue2md.models import Resource, resource_adapter
from issue2md.parser import parse_url, supported_types
from issue2md.utils import resource_to_markdown

LOG = logging.getLogger("issue2md.main")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    kinds = ", ".join(t.value for t in supported_types())
    parser = argparse.ArgumentParser(
        prog="issue2md",
        description=f"Convert a GitHub resource to Markdown (supported: {kinds})",
    )
    parser.add_argument("url", nargs="?", help="GitHub issue, pull request or discussion URL")
    parser.add_argument("output_file", nargs="?", help="Output file (default: stdout)")
    parser.add_argument("--output", "-o", dest="output_option", help="Output file (same as OUTPUT_FILE)")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument("--enable-reactions", action="store_true", help="Include reaction counts")
    parser.add_argument("--enable-user-links", action="store_true", help="Render @user as profile links")
    parser.add_argument(
        "--from-json",
        type=Path,
        help="Render a resource saved as JSON instead of fetching the URL",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)
    if not args.url and not args.from_json:
        parser.error("the following arguments are required: url")
    return args


def load_resource(path: Path) -> Resource:
    """Load a resource dumped with model_dump_json()."""
    return resource_adapter.validate_json(path.read_text())


def fetch_resource(config: AppConfig, url: str) -> Resource:
    """Classify url and fetch it from GitHub."""
    resource_url = parse_url(url)
    LOG.info("Fetching %s %s#%d", resource_url.type.value, resource_url.full_name, resource_url.number)
    adapter = GitHubAdapter(
        token=config.github_token_resolved,
        api_url=config.github.api_url,
        graphql_url=config.github.graphql_url,
        timeout=config.github.timeout,
        user_agent=config.github.user_agent,
        per_page=config.github.per_page,
    )
    return adapter.fetch(resource_url)


def write_output(markdown: str, output_file: str | None) -> None:
    if output_file:
        Path(output_file).write_text(markdown, encoding="utf-8")
        LOG.info("Wrote %s", output_file)
    else:
        sys.stdout.write(markdown)


def main(argv: list[str] | None = None) -> int:
    """Entry point: fetch (or load), render, write."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except Issue2MDError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    config = config.with_cli_overrides(
        enable_reactions=args.enable_reactions,
        enable_user_links=args.enable_user_links,
        output_file=args.output_option or args.output_file,
    )
    Issue2MDLogging(config.logging, verbose=args.verbose).setup()

    try:
        if args.from_json:
            resource = load_resource(args.from_json)
        else:
            resource = fetch_resource(config, args.url)
        markdown = resource_to_markdown(
            resource,
            enable_reactions=config.output.enable_reactions,
            enable_user_links=config.output.enable_user_links,
        )
        write_output(markdown, config.output.output_file)
    except Issue2MDError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValidationError) as e:
        LOG.debug("Failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
