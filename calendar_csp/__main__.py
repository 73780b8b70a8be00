"""Solve a calendar problem read from a JSON request file."""

import argparse
import json
import logging
import sys

from .api import solve_calendar_api
from .config import settings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="calendar_csp", description="Schedule meetings under date constraints"
    )
    parser.add_argument("request", help="Path to a JSON request, or '-' for stdin")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)
    logger = logging.getLogger(__name__)

    if args.request == "-":
        request_data = json.load(sys.stdin)
    else:
        with open(args.request, encoding="utf-8") as f:
            request_data = json.load(f)
    logger.debug("Loaded request with %d constraints", len(request_data.get("constraints", [])))

    response = solve_calendar_api(request_data)
    print(json.dumps(response, indent=2))
    return 0 if response["result"]["success"] else 1


if __name__ == "__main__":
    sys.exit(main())
