import argparse
import sys
from typing import List, Optional

from texnumber.cli import autodetect_sink, autodetect_source, renumber
from texnumber.config import RenumberConfig, parse_on_off
from texnumber.diagnostics import TexNumberError

DESCRIPTION = (
    "Renumbers LaTeX equations. "
    "The program reads from the standard input and writes to the standard output.\n"
    "Warnings and errors are output to the standard error stream."
)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "texnumber",
        description=DESCRIPTION,
    )
    parser.add_argument(
        "pattern",
        type=str,
        help="The prefix of the labels to renumber, e.g. 'eq:'. Only \\label{pattern...} definitions are numbered.",
    )
    parser.add_argument(
        "replacement",
        type=str,
        help="The text the new labels start with, e.g. 'E' turns \\ref{eq:first} into \\ref{E1}.",
    )
    parser.add_argument(
        "ignore_comments",
        nargs="?",
        type=str.upper,
        choices=["ON", "OFF"],
        default="ON",
        help="Must be ON or OFF (any case). ON (default) leaves everything after a '%%' alone, OFF renumbers inside comments too. Anything else is rejected, so to give a log_file this flag has to be given first.",
    )
    parser.add_argument(
        "log_file",
        nargs="?",
        default=None,
        help="Write the 'label -> new label' table here after a successful run. '-' writes it to the standard error stream.",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=None,
        help="Read this file instead of the standard input.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write to this file instead of the standard output.",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default="utf-8",
        help="The encoding of the input, output and log files.",
    )
    return parser


def wants_help(argv: List[str]) -> bool:
    # Kept from the original tool: `texnumber help`, `texnumber --help`, `texnumber ?` all print the usage
    return bool(argv) and ("help" in argv[0] or "?" in argv[0])


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = make_parser()
    if wants_help(argv):
        parser.print_help(sys.stdout)
        return 0

    args = parser.parse_args(argv)

    try:
        config = RenumberConfig(
            prefix=args.pattern,
            replacement=args.replacement,
            ignore_comments=parse_on_off(args.ignore_comments),
            report_destination=args.log_file,
        )
        source = autodetect_source(args.input, args.encoding)
        sink = autodetect_sink(args.output, args.encoding)
    except ValueError as e:
        parser.error(str(e))

    try:
        renumber(source, sink, config)
    except TexNumberError as e:
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read or write a file: {e}", file=sys.stderr)
        return 1
    return 0


def run_cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
