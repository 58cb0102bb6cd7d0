"""Entry point for sutja CLI client."""

import argparse
import logging
import sys

import requests

from cli.api_client import SutjaAPIClient
from cli.console import ConsoleUI
from cli.local_client import LocalQuizClient
from core.config import NUMBER_SYSTEMS, DIRECTIONS
from core.models import QuizSettings


def main():
    parser = argparse.ArgumentParser(description='Sutja - Korean number practice')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--user',
        default='default',
        help='User ID (default: default)'
    )
    parser.add_argument(
        '--local',
        action='store_true',
        help='Run the quiz in-process without a server'
    )
    parser.add_argument('--system', choices=NUMBER_SYSTEMS, help='Number system to start with')
    parser.add_argument('--direction', choices=DIRECTIONS, help='Quiz direction to start with')
    parser.add_argument('--min', dest='min_range', help='Smallest number asked')
    parser.add_argument('--max', dest='max_range', help='Largest number asked')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    overrides = {
        'number_system': args.system,
        'direction': args.direction,
        'min_range': args.min_range,
        'max_range': args.max_range
    }
    if args.local:
        client = LocalQuizClient(QuizSettings.from_dict({k: v for k, v in overrides.items() if v is not None}),
                                 user_id=args.user)
    else:
        client = SutjaAPIClient(base_url=args.server, user_id=args.user)
    ui = ConsoleUI(client)

    if not args.local and any(v is not None for v in overrides.values()):
        try:
            client.update_settings(**overrides)
        except requests.RequestException as e:
            print(f"Error applying settings: {e}")

    try:
        ui.run()
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
