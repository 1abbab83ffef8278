"""CLI for NotifyMe Campfire.

Commands:
  notifyme send --to ROOM [--type TYPE] [--token T] [--from ACCOUNT] MESSAGE
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any

from notifyme.defaults import ALLOWED_MESSAGE_TYPES, ENV_LOG_JSON, ENV_LOG_LEVEL

log = logging.getLogger("notifyme.cli")


def _out(data: Any) -> int:
    print(json.dumps(data, indent=2, default=str))
    if isinstance(data, dict) and "error" in data:
        return 1
    return 0


def cmd_send(args: argparse.Namespace) -> int:
    import httpx

    from notifyme import dispatcher
    from notifyme.config import CampfireConfig
    from notifyme.gateways.factory import make_gateway

    config = CampfireConfig.from_env().merged(
        token=args.token,
        from_=args.account,
        type=args.type,
    )
    with httpx.Client() as client:
        gateway = make_gateway(config, client=client)
        response = dispatcher.notify(args.to, args.message, gateway=gateway)

    result = response.to_dict()
    if not response.is_sent():
        result["error"] = response.message
    return _out(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notifyme",
        description="Send notifications to Campfire rooms",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(ENV_LOG_LEVEL, "WARNING"),
        help="Logging level (default: $NOTIFYME_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("send", help="Send a message to a room")
    p.add_argument("--to", required=True, help="Room identifier")
    p.add_argument(
        "--type",
        help="Message type: " + ", ".join(sorted(ALLOWED_MESSAGE_TYPES))
             + " (unknown values fall back to TextMessage)",
    )
    p.add_argument("--token", help="API token (default: $NOTIFYME_CAMPFIRE_TOKEN)")
    p.add_argument(
        "--from", dest="account",
        help="Account subdomain (default: $NOTIFYME_CAMPFIRE_FROM)",
    )
    p.add_argument("message", help="Message body, or sound name for SoundMessage")

    return parser


_DISPATCH = {
    "send": cmd_send,
}


def main(argv: list[str] | None = None) -> int:
    from notifyme.observability import setup_logging

    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    setup_logging(args.log_level, json_output=os.environ.get(ENV_LOG_JSON) == "1")

    handler = _DISPATCH.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
