#!/usr/bin/env python3
# local_invoke.py

import argparse
import logging
import os
import sys

from alexa_handler import AlexaHandler
from lambda_function import handle_request_json
from rest_api import HttpRestApi
from settings import ConfigurationError, get_api_url


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Runs a directive JSON through the skill against the real backend.')
    parser.add_argument('file', nargs='?', help='Directive JSON file (read from stdin if omitted)')
    parser.add_argument('--api-url', help='Backend base URL (defaults to API_URL)')
    parser.add_argument('--deterministic', action='store_true',
                        help='Static messageIds and timestamps, as in the unit tests')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    if args.file and os.path.isfile(args.file):
        with open(args.file, 'r', encoding='utf-8') as f:
            request_json = f.read()
    else:
        if sys.stdin.isatty() and not args.file:
            parser.print_help()
            return 1
        request_json = sys.stdin.read()

    try:
        api_url = args.api_url or get_api_url()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    handler = AlexaHandler.for_unit_testing() if args.deterministic else AlexaHandler()

    print(handle_request_json(request_json, HttpRestApi(api_url), handler))
    return 0


if __name__ == "__main__":
    sys.exit(main())
