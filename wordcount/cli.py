import argparse
import sys
from typing import Optional

from wordcount.config import load_config
from wordcount.environment import program_name
from wordcount.log import setup_logger
from wordcount.report import ColumnSelection, build_report
from wordcount.summarizer import STDIN_NAME, read_input, summarize_inputs


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog or program_name(),
        description=(
            "Print newline, word, and byte counts for each FILE, and a total "
            "line if more than one FILE is specified."
        ),
        epilog="With no FILE, or when FILE is -, read standard input.",
    )
    parser.add_argument("-l", "--lines", action="store_true", help="print the newline counts")
    parser.add_argument("-w", "--words", action="store_true", help="print the word counts")
    parser.add_argument("-m", "--chars", action="store_true", help="print the character counts")
    parser.add_argument("-c", "--bytes", action="store_true", help="print the byte counts")
    parser.add_argument("files", nargs="*", help="files to count")
    return parser


def column_selection(args: argparse.Namespace, default_columns: list[str]) -> ColumnSelection:
    selected = ColumnSelection(
        show_lines=args.lines,
        show_words=args.words,
        show_chars=args.chars,
        show_bytes=args.bytes,
    )
    if selected.any():
        return selected
    return ColumnSelection.from_names(default_columns)


def main(argv: Optional[list[str]] = None) -> int:
    cfg = load_config()
    setup_logger(cfg.log_level)

    args = build_parser().parse_args(argv)
    columns = column_selection(args, cfg.columns)
    files = args.files or [STDIN_NAME]

    outcomes = summarize_inputs(files, fetch=lambda name: read_input(name, cfg.encoding))
    for line in build_report(outcomes, columns):
        stream = sys.stderr if line.is_error else sys.stdout
        print(line.text, file=stream)

    # Failures are reported but never change the exit status.
    return 0


if __name__ == "__main__":
    sys.exit(main())
