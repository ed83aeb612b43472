#!/usr/bin/env python3
"""CLI tools for the Aligo SMS driver.

Usage:
    aligo-sms send --to 01012345678 --text "hello"    # Send one message
    aligo-sms send --to ... --text ... --type lms --subject "title"
    aligo-sms send --to ... --text ... --delay 600     # Reserve 10 minutes ahead
    aligo-sms config                                   # Show effective settings

Credentials come from configs/*.yaml or SMS_ALIGO__* environment variables.
"""

from __future__ import annotations

import argparse
import json
import sys

from aligo_sms.config import get_settings
from aligo_sms.core.exceptions import ConfigError
from aligo_sms.core.log import get_logger, setup_logging
from aligo_sms.sms.base import SMSMessage
from aligo_sms.sms.factory import get_sms_gateway

log = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def send(args: argparse.Namespace) -> int:
    """Send one message and print the result as JSON."""
    try:
        gateway = get_sms_gateway()
    except ConfigError as e:
        log.error("Invalid SMS configuration", error=e.message)
        print(json.dumps(e.to_dict(), ensure_ascii=False))
        return EXIT_CONFIG

    message = SMSMessage(
        to=args.to,
        text=args.text,
        sender=args.sender,
        message_type=args.type,
        delay=args.delay,
        subject=args.subject,
        epoch=args.epoch,
    )
    result = gateway.send_sms(message)

    print(json.dumps(result.to_dict(), ensure_ascii=False, default=str))
    return EXIT_OK if result.success else EXIT_FAILED


def show_config(args: argparse.Namespace) -> int:
    """Print effective settings with the API key masked."""
    print(json.dumps(get_settings().masked(), ensure_ascii=False, indent=2))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Aligo SMS CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # send
    send_parser = subparsers.add_parser("send", help="Send an SMS or LMS")
    send_parser.add_argument("--to", required=True, help="Recipient phone number")
    send_parser.add_argument("--text", required=True, help="Message body")
    send_parser.add_argument(
        "--from", dest="sender", default=None,
        help="Sender number (default: configured sender)"
    )
    send_parser.add_argument(
        "--type", default=None, help="SMS or LMS (default: configured type)"
    )
    send_parser.add_argument("--subject", default=None, help="LMS subject")
    send_parser.add_argument(
        "--delay", type=int, default=None,
        help="Reserve the send this many seconds from now"
    )
    send_parser.add_argument(
        "--epoch", type=int, default=None,
        help="Reserve the send at this Unix timestamp (wins over --delay)"
    )

    # config
    subparsers.add_parser("config", help="Show effective settings")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_FAILED

    settings = get_settings()
    setup_logging(level=settings.log_level, json_output=settings.log_json)

    commands = {
        "send": send,
        "config": show_config,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
