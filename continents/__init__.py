''' Entry point for the continents server '''

import logging
import argparse
import asyncio
import sys

from sys import argv

from . import webserver

from .config import ServerConfig
from .constants import NOT_FOUND_STATUS, MAX_BODY_SIZE
from .client import run as run_client

def run_server():
    ''' Main function that parses the arguments, spawns asyncio, and runs the server '''

    # Invoked by test runner?
    if argv[0] == "-c":
        argv[0] = "python"

    defaults = ServerConfig()

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default=defaults.host,
        help="Address to bind to")
    parser.add_argument("--port", type=int, default=defaults.port,
        help="Port to listen on")
    parser.add_argument("--not-found-status", type=int, default=NOT_FOUND_STATUS,
        help="HTTP status returned for unknown continents")
    parser.add_argument("--reject-malformed", action='store_true',
        help="Answer malformed request bodies with 400 Bad Request")
    parser.add_argument("--max-body-size", type=int, default=MAX_BODY_SIZE,
        help="Largest accepted request body in bytes")
    parser.add_argument("--loglevel", default="info",
        help="Set the logging verbosity", choices=["warn", "debug", "info"])

    args = parser.parse_args()
    logging.basicConfig(level=args.loglevel.upper())

    config = ServerConfig.from_args(args)
    problems = config.validate()
    if problems:
        for problem in problems:
            print(f"ERROR: {problem}")
        sys.exit(1)

    try:
        asyncio.run(webserver.serve(config))
    except KeyboardInterrupt:
        logging.info("Got Ctrl+C")

__all__ = ["run_server", "run_client"]

if __name__ == '__main__':
    run_server()
