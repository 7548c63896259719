"""Command-line driver: read a file, validate it, render its escapes."""

import argparse
import logging
import random
import sys
from pathlib import Path

from ._config import default_log_level, default_policy_name
from ._decorators import measure_time
from .errors import InvalidBufferError, MalformedEscapeError, PolicyError
from .generate import generate_input
from .policy import get_policy, list_policies
from .render import iter_escapes, render
from .validate import check_buffer, terminate

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO = 1
EXIT_INVALID = 2
EXIT_REJECTED = 3

DEFAULT_INPUT = "input.txt"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level_name: str) -> None:
    """Send log records at ``level_name`` and above to stderr."""
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="bytescape",
        description="Decode \\n, \\r, \\t, \\\", \\\\ and \\u{X} escapes in UTF-8 text.",
    )
    parser.add_argument(
        "--log",
        default=default_log_level(),
        choices=LOG_LEVELS,
        help="Set the logging level (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render escapes in a file.")
    render_cmd.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Input file (default: {DEFAULT_INPUT}).",
    )
    render_cmd.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        default=None,
        help="Write rendered bytes here instead of stdout.",
    )
    render_cmd.add_argument(
        "--policy",
        default=default_policy_name(),
        help=f"Malformed escape policy: {', '.join(list_policies())} (default: best-effort).",
    )
    render_cmd.add_argument(
        "--reject-surrogates",
        action="store_true",
        help="Leave \\u{D800}..\\u{DFFF} escapes undecoded.",
    )
    render_cmd.add_argument(
        "--structural",
        action="store_true",
        help="Require fully well-formed UTF-8 input.",
    )

    scan_cmd = sub.add_parser("scan", help="List the escapes found in a file.")
    scan_cmd.add_argument("path", help="Input file.")
    scan_cmd.add_argument(
        "--reject-surrogates",
        action="store_true",
        help="Classify surrogate escapes as invalid codepoints.",
    )

    validate_cmd = sub.add_parser("validate", help="Check that a file can be rendered.")
    validate_cmd.add_argument("path", help="Input file.")
    validate_cmd.add_argument(
        "--structural",
        action="store_true",
        help="Require fully well-formed UTF-8 input.",
    )

    generate_cmd = sub.add_parser("generate", help="Print random escape-laden text.")
    generate_cmd.add_argument(
        "segments", type=int, help="Number of escapes to generate."
    )
    generate_cmd.add_argument(
        "--seed", type=int, default=None, help="Seed for repeatable output."
    )

    return parser


def _load(path: str, structural: bool = False) -> bytes:
    """Read ``path`` and return its validated, terminated contents."""
    data = terminate(Path(path).read_bytes())
    check_buffer(data, len(data), structural=structural)
    log.info(f"loaded {len(data) - 1} bytes from {path}")
    return data


@measure_time
def _render_command(args: argparse.Namespace) -> int:
    policy = get_policy(args.policy)
    source = _load(args.path, args.structural)
    rendered = render(
        source, policy=policy, allow_surrogates=not args.reject_surrogates
    )

    if args.output:
        Path(args.output).write_bytes(rendered)
        log.info(f"wrote {len(rendered)} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(rendered)
        sys.stdout.buffer.flush()
    return EXIT_OK


def _scan_command(args: argparse.Namespace) -> int:
    source = _load(args.path)
    for token in iter_escapes(source, allow_surrogates=not args.reject_surrogates):
        print(
            f"{token.start}\t{token.kind.value}\t{token.fragment(source)!r}\t"
            f"{token.replacement.hex(' ')}"
        )
    return EXIT_OK


def _validate_command(args: argparse.Namespace) -> int:
    _load(args.path, args.structural)
    print(f"{args.path}: valid")
    return EXIT_OK


def _generate_command(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    print(generate_input(args.segments, rng=rng))
    return EXIT_OK


_COMMANDS = {
    "render": _render_command,
    "scan": _scan_command,
    "validate": _validate_command,
    "generate": _generate_command,
}


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the ``bytescape`` console script.

    Exit codes: 0 success, 1 read or write failure, 2 invalid input or
    usage, 3 escape rejected by the strict policy.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log)
    log.debug(f"parsed arguments: {args}")

    try:
        return _COMMANDS[args.command](args)
    except OSError as e:
        log.error(f"I/O failure: {e}")
        return EXIT_IO
    except InvalidBufferError as e:
        log.error(f"invalid input: {e}")
        return EXIT_INVALID
    except PolicyError as e:
        log.error(f"bad configuration: {e}")
        return EXIT_INVALID
    except MalformedEscapeError as e:
        log.error(f"escape rejected: {e}")
        return EXIT_REJECTED
    except ValueError as e:
        log.error(f"bad argument: {e}")
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
