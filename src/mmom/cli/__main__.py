#!/usr/bin/env python3

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from mmom.cli import config, new
from mmom.core.config import default_config_path
from mmom.core.constants import DATETIME_FORMAT
from mmom.core.errors import MmomError
from mmom.core.logging_setup import init_logging
from mmom.core.resolver import local_now

logger = logging.getLogger("mmom.cli")


def _version() -> str:
    try:
        return version("mmom")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mmom",
        description="Create a new document stamped with a metadata block.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to the console.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    new.register(parser)
    config.register(parser)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.create_config:
        handler = config.create_config
    elif args.show_config:
        handler = config.show_config
    else:
        handler = new.new_document

    config_path = Path(args.config).expanduser() if args.config else default_config_path()
    init_logging(config_path.parent, verbose=args.verbose)
    logger.info("--------Start logging at %s--------", local_now().strftime(DATETIME_FORMAT))

    try:
        code = handler(args, config_path)
    except MmomError as e:
        logger.error("%s", e)
        code = 1
    finally:
        logger.info("--------End logging at %s--------", local_now().strftime(DATETIME_FORMAT))
    return code


if __name__ == "__main__":
    sys.exit(main())
