"""Line calibrator — first and last digit token → two-digit value.

A line's calibration value is 10 * first + last. A line with a single
digit token uses it twice; a line with none contributes 0.
"""

from dataclasses import dataclass

from .scanner import Scanner


@dataclass
class LineResult:
    number: int
    line: str
    total: int
    running_sum: int


def _first_and_last(digits):
    """Return (first, last) from a digit stream, or None when empty."""
    first = last = None
    for digit in digits:
        if first is None:
            first = digit
        last = digit
    if first is None:
        return None
    return first, last


def calibrate_line(line, trie):
    """Calibration value for one line, in the range 0-99."""
    return LineCalibrator(trie)(line)


class LineCalibrator:
    """Callable calibrator bound to one shared trie."""

    def __init__(self, trie):
        self.scanner = Scanner(trie)

    def __call__(self, line: str) -> int:
        pair = _first_and_last(self.scanner.digits(line))
        if pair is None:
            return 0
        first, last = pair
        return first * 10 + last


def calibrate_lines(lines, trie):
    """Calibrate lines in order, yielding a LineResult per line.

    Line numbers count from 0.
    """
    calibrator = LineCalibrator(trie)
    running_sum = 0
    for number, line in enumerate(lines):
        total = calibrator(line)
        running_sum += total
        yield LineResult(number, line, total, running_sum)
