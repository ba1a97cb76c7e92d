# mmom/cli/config.py
#!/usr/bin/env python3
from pathlib import Path

from mmom.core.config import create_default_config_file, load_config


def create_config(args, config_path: Path) -> int:
    create_default_config_file(config_path)
    print(f"Config file created at {config_path}")
    return 0


def show_config(args, config_path: Path) -> int:
    print(load_config(config_path).to_json_text())
    return 0


def register(parser):
    group = parser.add_argument_group("config utilities")
    group.add_argument("--config", metavar="PATH",
                       help="Config file to use (default: $MMOM_CONFIG_PATH or config.json beside the executable).")
    modes = group.add_mutually_exclusive_group()
    modes.add_argument("--create-config", action="store_true",
                       help="Create a default config file instead of a document; fails if one exists.")
    modes.add_argument("--show-config", action="store_true", help="Print the effective config as JSON.")
