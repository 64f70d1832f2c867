# ddns.py
import argparse
import json
import logging
import sys
from pathlib import Path

from mac_vendor_lookup import MacLookup

from errors import DDNSError
from service import DynamicDNS, load_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _print(data) -> None:
    print(json.dumps(data, indent=4))


def run(args: argparse.Namespace, ddns: DynamicDNS) -> int:
    """Runs one command against the registry and returns the exit status."""
    if args.command == "get":
        record = ddns.resolve(args.mac)
        if record is None:
            logger.info(f"No known host matches {args.mac}")
            return EXIT_NOT_FOUND
        _print({"address": record.address})
    elif args.command == "set":
        _print(ddns.upsert(args.mac, args.ip).to_dict())
    elif args.command == "delete":
        identifier = ddns.remove(args.mac)
        _print(f"{identifier} successfully deleted")
    elif args.command == "list":
        _print([record.to_dict() for record in ddns.list_hosts()])
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dynamic DNS host registry")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--settings", type=Path, help="Path to settings.toml")
    parser.add_argument("--update-mac-db", action="store_true", help="Force update of the MAC vendor database")
    commands = parser.add_subparsers(dest="command")

    get = commands.add_parser("get", help="Show the last reported address of a host")
    get.add_argument("mac")
    set_ = commands.add_parser("set", help="Report the address of a host")
    set_.add_argument("mac")
    set_.add_argument("ip")
    delete = commands.add_parser("delete", help="Forget the address of a host")
    delete.add_argument("mac")
    commands.add_parser("list", help="List known hosts with their addresses")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')
    else:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    if args.update_mac_db:
        MacLookup().update_vendors()

    if args.command is None:
        if not args.update_mac_db:
            parser.print_help()
        return EXIT_OK

    try:
        ddns = DynamicDNS.from_settings(load_settings(args.settings))
        return run(args, ddns)
    except DDNSError as e:
        if e.identifier:
            logger.error(f"{e.kind.value}: {e} ({e.identifier})")
        else:
            logger.error(f"{e.kind.value}: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
