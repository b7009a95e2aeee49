#!/usr/bin/env python3
"""
Command line entry point.

    target-finder test <target> [--fuzzy]
    target-finder testnet <name>

Prints the resolved label on stdout; diagnostics go to stderr.
"""
import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .candidate_source import BazelCandidateSource
from .config_loader import load_config_from_env
from .exceptions import ConfigurationError, QueryFailedError
from .resolution import create_target_resolver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="target-finder",
        description="Find Bazel system test targets by (partial) name",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    test_parser = subparsers.add_parser("test", help="Resolve a system test target")
    test_parser.add_argument("target", help="Full or partial target name")
    test_parser.add_argument(
        "--fuzzy",
        action="store_true",
        help="Use approximate matching instead of substring matching",
    )

    testnet_parser = subparsers.add_parser("testnet", help="Resolve a dynamic testnet target")
    testnet_parser.add_argument("target", help="Testnet target label")
    return parser


def _emit(console: Console, text: str, style: Optional[str] = None):
    # Labels and queries may contain "[", so rich markup stays off
    console.print(text, style=style, highlight=False, markup=False, soft_wrap=True)


def run_test(args, source: BazelCandidateSource, out: Console, err: Console) -> int:
    all_targets = source.list_test_targets()

    if args.target in all_targets:
        _emit(out, args.target)
        return 0

    resolver = create_target_resolver(source.config)
    outcome = resolver.resolve(all_targets, args.target, use_fuzzy=args.fuzzy)

    if not outcome.is_resolved:
        _emit(err, outcome.message, style="bold red")
        return 1

    _emit(err, outcome.message, style="cyan")
    _emit(out, outcome.target)
    return 0


def run_testnet(args, source: BazelCandidateSource, out: Console, err: Console) -> int:
    testnets = source.list_dynamic_testnet_targets()

    if args.target in testnets:
        _emit(out, args.target)
        return 0

    matches = create_target_resolver(source.config).closest_matches(testnets, args.target)

    if matches:
        _emit(
            err,
            f"Testnet `{args.target}` doesn't exist. Closest matches:\n" + "\n".join(matches),
            style="bold red",
        )
    else:
        _emit(
            err,
            f"Testnet `{args.target}` doesn't exist and no similar testnets were found.",
            style="bold red",
        )
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    out = Console()
    err = Console(stderr=True)

    try:
        source = BazelCandidateSource(load_config_from_env())
        if args.command == "test":
            return run_test(args, source, out, err)
        return run_testnet(args, source, out, err)
    except (ConfigurationError, QueryFailedError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _emit(err, str(exc), style="bold red")
        return 1


if __name__ == "__main__":
    sys.exit(main())
