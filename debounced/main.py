import argparse
import json
import logging
import sys

from .constants import DEFAULT_LOG_LEVEL, DEFAULT_WAIT_MS, LOG_LEVELS
from .debounce import debounce
from .fetch import DetailsFetcher, get_json
from .logging import setup_logging
from .utils import check_wait

logger = logging.getLogger("debounced")


def wait_ms(value):
    try:
        return check_wait(float(value))
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError(
            f"expected a non-negative number of milliseconds, got {value!r}"
        ) from None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="debounced",
        description="Read lines from stdin and act only on the line that is "
        "followed by a quiet period.",
    )
    parser.add_argument(
        "--wait",
        type=wait_ms,
        default=DEFAULT_WAIT_MS,
        metavar="MS",
        help=f"Quiet period in milliseconds (default: {DEFAULT_WAIT_MS})",
    )
    parser.add_argument(
        "--url",
        metavar="TEMPLATE",
        help="Fetch this URL for each surviving line; {query} is replaced "
        "with the line",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def build_action(args, stdout):
    if args.url:

        def print_results(payload):
            print(json.dumps(payload), file=stdout, flush=True)

        return DetailsFetcher(args.url, print_results, wait=args.wait, fetch=get_json)

    def print_line(line):
        print(line, file=stdout, flush=True)

    return debounce(print_line, args.wait)


def main(argv=None, stdin=None, stdout=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    action = build_action(args, stdout)
    for line in stdin:
        action(line.rstrip("\n"))

    # end of input counts as the quiet period for the last line
    logger.debug("end of input, flushing")
    action.flush()
    # a firing may already be running on a timer thread, which dies with us
    action.join()
