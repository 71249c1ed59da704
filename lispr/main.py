"""Runs the lispr interpreter: reads one expression from standard input and evaluates it, using the error handling
context manager so that any fault ends the process with a diagnostic and exit status 1. Called from the lispr script.
"""

import argparse
import sys

from lispr.lang.error import ErrorHandler
from lispr.lang.session import Session


def main(argv=None, stdin=None, stdout=None):
    """Runs lispr. Takes no arguments besides -h."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(
            prog="lispr",
            description="Reads one expression from standard input and evaluates it.",
        )
        parser.parse_args(argv)

        Session(error_handler, stdin if stdin is not None else sys.stdin, out=stdout).run()


if __name__ == "__main__":
    main()
