"""CLI entrypoints for gopages commands."""

from __future__ import annotations

import argparse
import asyncio
import sys

from gopages.core.config import settings, validate_config
from gopages.env.environment import EnvironmentReader
from gopages.errors import GoPagesError
from gopages.git.operations import GitOperations
from gopages.github.client import GitHubClient
from gopages.go.module import GoToolchain
from gopages.pages.suffix import resolve_import_suffixes
from gopages.pages.writer import FileWriter
from gopages.service.notify import NotificationParams, notify
from gopages.service.update import update
from gopages.utils.logging import logger, set_verbose
from gopages.utils.validate import parse_options, parse_payload


def _add_payload_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--payload",
        required=True,
        help="Payload JSON: {owner, repoName, goModInfo: {Module: {Path}, Imports}}.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gopages",
        description="Publish Go vanity import redirect pages.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    update_parser = subparsers.add_parser(
        "update",
        help="Write redirect pages and commit them (or open a pull request).",
    )
    _add_payload_option(update_parser)
    update_parser.add_argument(
        "--pages-dir",
        default=settings.pages_dir,
        help="Directory the pages are written under (defaults to GOPAGES_PAGES_DIR or '.').",
    )
    update_parser.add_argument(
        "--change-type",
        choices=["commit", "pr"],
        default=settings.change_type,
        help="Push directly to the current branch or open a pull request.",
    )

    notify_parser = subparsers.add_parser(
        "notify",
        help="Post this module's payload as a comment on a pages-repository issue.",
    )
    notify_parser.add_argument("--owner", required=True, help="Owner of the pages repository.")
    notify_parser.add_argument("--repo-name", required=True, help="Name of the pages repository.")
    notify_parser.add_argument(
        "--issue-number", required=True, type=int, help="Issue that receives the comment."
    )

    suffixes_parser = subparsers.add_parser(
        "suffixes",
        help="Print the import suffixes a payload resolves to, one per line.",
    )
    _add_payload_option(suffixes_parser)

    return parser


def _github_client() -> GitHubClient:
    validate_config(settings)
    return GitHubClient(
        token=settings.github.token,
        base_url=settings.github.api_url,
        timeout=settings.github.timeout,
    )


async def _run_update(args: argparse.Namespace) -> None:
    payload = parse_payload(args.payload)
    options = parse_options(args.pages_dir, args.change_type)
    result = await update(
        options,
        payload,
        env=EnvironmentReader(),
        fs=FileWriter(),
        git=GitOperations(),
        github=_github_client(),
    )
    if result.decision and result.decision.has_changes:
        logger.info("Published %d pages (%s)", len(result.written_files), result.state.value)
    else:
        logger.info("Redirect pages already up to date")


async def _run_notify(args: argparse.Namespace) -> None:
    params = NotificationParams(
        owner=args.owner,
        repo_name=args.repo_name,
        issue_number=args.issue_number,
    )
    await notify(params, GoToolchain(), _github_client(), EnvironmentReader())


def _run_suffixes(args: argparse.Namespace) -> None:
    payload = parse_payload(args.payload)
    mod = payload.go_mod_info
    for suffix in resolve_import_suffixes(mod.module.path, mod.imports):
        print(suffix)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for gopages commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    set_verbose(bool(args.verbose))

    try:
        if args.command == "update":
            asyncio.run(_run_update(args))
        elif args.command == "notify":
            asyncio.run(_run_notify(args))
        elif args.command == "suffixes":
            _run_suffixes(args)
        else:  # pragma: no cover - argparse enforces choices
            parser.error(f"Unknown command {args.command}")
    except GoPagesError as exc:
        logger.error("gopages %s failed [%s]: %s", args.command, exc.code, exc.message)
        if exc.suggestion:
            logger.error("  %s", exc.suggestion)
        return 1
    except Exception:
        logger.exception("gopages %s failed", args.command)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
