"""
Command line entry point for gh-dungeon.
"""

import argparse
import logging
import sys

import requests

from dungeon_lib import __version__
from dungeon_lib.common import configure_logging, error, info
from dungeon_lib.config import HISTORY_FILE, resolve_settings, validate_repo
from dungeon_lib.display import FlavorPicker, FlavorValidationError, RoomRenderer, load_themes
from dungeon_lib.provider import GitHubContentProvider
from dungeon_lib.repl import DungeonSession
from dungeon_lib.repl.terminal import TerminalREPL


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-dungeon",
        description="Explore a GitHub repository as a text adventure",
    )
    parser.add_argument("repo", nargs="?",
                        help="Repository to explore, as owner/name (default: from config, else cli/cli)")
    parser.add_argument("--ref",
                        help="Start at this commit, branch or tag instead of the latest")
    parser.add_argument("--api-url",
                        help="GitHub API base URL (default: https://api.github.com)")
    parser.add_argument("--retries", type=int,
                        help="Times to retry a failed request before giving up")
    parser.add_argument("--debug", action="store_true",
                        help="Log API requests to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    settings = resolve_settings(args.repo, args.api_url, args.retries)
    if not validate_repo(settings.repo):
        error(f"Invalid repository '{settings.repo}', expected owner/name")
        return 1

    try:
        flavor = FlavorPicker(settings.repo, load_themes())
    except (FileNotFoundError, FlavorValidationError) as e:
        error(f"Could not load room descriptions: {e}")
        return 1

    if not settings.token:
        info("No GH_TOKEN or GITHUB_TOKEN set, using anonymous API access")

    provider = GitHubContentProvider(
        settings.repo,
        session=requests.Session(),
        api_url=settings.api_url,
        token=settings.token,
    )

    logger.debug("settings: repo=%s api=%s retries=%d", settings.repo, settings.api_url, settings.max_retries)

    session = DungeonSession(
        settings.repo,
        provider,
        TerminalREPL(history_file=HISTORY_FILE),
        renderer=RoomRenderer(),
        flavor=flavor,
        max_retries=settings.max_retries,
        ref=args.ref,
    )
    return session.run()


if __name__ == "__main__":
    sys.exit(main())
