#!/usr/bin/env python3
"""repohygiene CLI entrypoint."""

import sys
import argparse
import logging

from repohygiene.lib.config import ConfigError, build_scan_config
from repohygiene.commands import scan as cmd_scan_module

SCAN_EPILOG = """\
Columns:
  Project | Status | Branch | Ahead | Behind | Dirty

Status tags:
  UNINITIALIZED       Not a git repo
  NO_REMOTE           Repo exists but no 'origin'
  NO_UPSTREAM         Current branch not tracking a remote branch
  NOT_PUSHED_OR_AHEAD Has local commits not on remote, or never pushed
  BEHIND_REMOTE       Local behind upstream
  DIRTY               Uncommitted changes
  UNTRACKED_BRANCHES  Local branches without upstreams
  OK                  Everything is fine

Safety rules in --fix:
  - Skips DIRTY repos
  - Won't pull or rebase
  - Requires --remote-template to add origin
  - Sets upstream by pushing with -u when remote exists
"""


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: '{value}'")
    return number


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout is reserved for the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_scan(args):
    try:
        config = build_scan_config(args)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return cmd_scan_module.cmd_scan(args, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='repohygiene',
        description='Git hygiene auditor for a directory of projects',
        allow_abbrev=False,
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging to stderr')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # repohygiene scan
    p_scan = subparsers.add_parser(
        'scan',
        help='Report status of every project folder',
        description='Scan each immediate subfolder of BASE_DIR and report git status hygiene.',
        epilog=SCAN_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p_scan.add_argument('base_dir', nargs='?', default='.', metavar='BASE_DIR',
                        help='Directory holding the projects (default: current directory)')
    p_scan.add_argument('--fix', action='store_true',
                        help='Perform safe fixes: add origin (via template), set upstream, push if ahead')
    p_scan.add_argument('--remote-template', metavar='TPL',
                        help='Template for origin when missing; {name} is the project folder name, '
                             'e.g. git@github.com:me/{name}.git')
    p_scan.add_argument('--default-branch', metavar='NAME',
                        help='Branch name assumed for repos with no commits yet (--fix only)')
    p_scan.add_argument('--quiet', action='store_const', const=True, default=None,
                        help='Suppress header and non-essential fix/skip lines')
    p_scan.add_argument('--config', metavar='PATH',
                        help='YAML config file (default: BASE_DIR/.repohygiene.yaml if present)')
    p_scan.add_argument('--git-timeout', type=positive_float, metavar='SECONDS',
                        help='Abort any single git call after this many seconds (default: no limit)')
    p_scan.add_argument('--no-color', dest='color', action='store_const', const=False, default=None,
                        help='Disable colored output')
    p_scan.add_argument('--verbose', '-v', action='store_true', default=argparse.SUPPRESS,
                        help='Debug logging to stderr')
    p_scan.set_defaults(func=cmd_scan)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
