"""Command-line front door for treepath.

Parses subcommands, qualifies relative arguments against the working
directory, and prints normalized paths, relative spellings, common roots
or walk results.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_policy, save_platform_name
from .errors import PathError
from .paths import DirectoryPath, FilePath
from .policy import POLICIES, PathPolicy, policy_for_name


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treepath",
        description="Normalize, relate and walk filesystem paths.",
    )
    parser.add_argument(
        "--platform",
        choices=sorted(POLICIES),
        default=None,
        help="Path syntax to use (default: saved preference, else host platform).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    commands = parser.add_subparsers(dest="command", required=True)

    normalize = commands.add_parser("normalize", help="Print normalized absolute paths.")
    normalize.add_argument("paths", nargs="+", metavar="PATH")

    relative = commands.add_parser("relative", help="Print PATH relative to FROM_DIR.")
    relative.add_argument("path", metavar="PATH")
    relative.add_argument("from_directory", metavar="FROM_DIR")

    common_root = commands.add_parser("common-root", help="Print the common ancestor of two directories.")
    common_root.add_argument("first", metavar="DIR")
    common_root.add_argument("second", metavar="DIR")

    walk = commands.add_parser("walk", help="List every file below a directory, depth first.")
    walk.add_argument("directory", nargs="?", default=".", metavar="DIR")
    walk.add_argument("--relative", action="store_true", help="Print paths relative to DIR.")

    config = commands.add_parser("config", help="Persist CLI preferences.")
    config.add_argument("--platform", dest="saved_platform", choices=sorted(POLICIES), required=True)
    return parser


def _resolve_policy(name: str | None) -> PathPolicy:
    if name is not None:
        return policy_for_name(name)
    return load_policy()


def _run(args: argparse.Namespace, policy: PathPolicy) -> list[str]:
    if args.command == "normalize":
        return [DirectoryPath.qualify(raw, policy).as_absolute_string() for raw in args.paths]

    if args.command == "relative":
        target = DirectoryPath.qualify(args.path, policy)
        origin = DirectoryPath.qualify(args.from_directory, policy)
        return [target.as_relative_string(origin)]

    if args.command == "common-root":
        first = DirectoryPath.qualify(args.first, policy)
        second = DirectoryPath.qualify(args.second, policy)
        return [first.find_common_root(second).as_absolute_string()]

    if args.command == "walk":
        root = DirectoryPath.qualify(args.directory, policy)
        lines: list[str] = []

        def record(file_path: FilePath) -> None:
            lines.append(file_path.as_relative_string(root) if args.relative else file_path.as_absolute_string())

        root.walk(record)
        return lines

    if not save_platform_name(args.saved_platform):
        raise SystemExit("treepath: could not write config file")
    return []


def main(argv: list[str] | None = None) -> None:
    """Parse ``argv`` (default ``sys.argv[1:]``) and run one subcommand."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    policy = _resolve_policy(args.platform)
    try:
        lines = _run(args, policy)
    except PathError as exc:
        raise SystemExit(f"treepath: {exc}") from exc

    for line in lines:
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
