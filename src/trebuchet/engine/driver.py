"""Calibration driver — sum the calibration values of a text file.

Usage:
    python -m trebuchet.engine.driver [input_file] [-v] [--log-file PATH]

Reads ./input.txt unless another file is given, calibrates every line and
prints the sum. With --verbose each line is reported as

    checking line <N>: <LINE> total=<T> sum=<S>

before the final sum. Exits 1 if the input file cannot be read.
"""

import argparse
import sys
from pathlib import Path

from trebuchet.core.token_trie import TokenTrie
from .calibrator import calibrate_lines


DEFAULT_INPUT = "./input.txt"


class InputUnavailable(Exception):
    """The input file could not be opened or read."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read input file {path}: {reason}")


def split_lines(text):
    """Split on \\n or \\r\\n, dropping terminators.

    A trailing terminator does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path):
    """Read a UTF-8 text file into lines.

    Undecodable bytes are replaced and so never match a digit token.

    Raises:
        InputUnavailable: if the file cannot be opened or read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            text = f.read()
    except OSError as e:
        raise InputUnavailable(path, e.strerror or str(e)) from e
    return split_lines(text)


def run(path=DEFAULT_INPUT, verbose=False, log_file=None):
    """Calibrate every line of a file and print the sum.

    Args:
        path: Input text file
        verbose: Print a diagnostic line per input line
        log_file: Optional path that receives a copy of all output

    Returns:
        dict with the path, line counts and the calibration sum
    """
    lines = read_lines(path)
    trie = TokenTrie.with_digits()
    log = open(log_file, "w", encoding="utf-8") if log_file else None

    def _log(msg):
        if log:
            log.write(msg + "\n")
        print(msg)

    total_sum = 0
    digitless = 0
    try:
        for result in calibrate_lines(lines, trie):
            total_sum = result.running_sum
            if result.total == 0:
                digitless += 1
            if verbose:
                _log(f"checking line {result.number}: {result.line} "
                     f"total={result.total} sum={result.running_sum}")
        _log(str(total_sum))
    finally:
        if log:
            log.close()

    return {
        "path": str(path),
        "line_count": len(lines),
        "digitless_lines": digitless,
        "sum": total_sum,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Sum the calibration values of a text file")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT,
                        help=f"Input text file (default: {DEFAULT_INPUT})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print a diagnostic line per input line")
    parser.add_argument("--log-file", default=None,
                        help="Also write all output to this file")
    args = parser.parse_args(argv)

    try:
        run(Path(args.input), verbose=args.verbose, log_file=args.log_file)
    except InputUnavailable as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: Cannot write log file {args.log_file}: "
              f"{e.strerror or e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
