"""CLI entry point for the task tracker."""

import argparse
import sys
from typing import TextIO

from dotenv import load_dotenv

from src.interpreter import TaskInterpreter
from src.interpreter import messages
from src.logging_config import configure_logging
from src.storage import FileTaskStorage


def run(interpreter: TaskInterpreter, lines: TextIO, out: TextIO) -> None:
    """Answer input lines until ``bye`` or end of input."""
    print(messages.GREETING, file=out)
    for raw in lines:
        response = interpreter.handle(raw.rstrip("\r\n"))
        print(response.text, file=out)
        if response.exit_requested:
            break


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Run the task tracker")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="Task data file (overrides TASK_TRACKER_DATA_FILE env var)",
    )
    args = parser.parse_args()
    configure_logging(level_override=args.log_level)

    interpreter = TaskInterpreter(storage=FileTaskStorage(args.data_file))
    try:
        run(interpreter, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        print(messages.FAREWELL)
    return 0


if __name__ == "__main__":
    sys.exit(main())
