#!/usr/bin/env python3

from pathlib import Path

from mmom.core.app import NewDocumentRequest, run
from mmom.core.constants import DEFAULT_FILENAME
from mmom.core.opener import SystemOpener


def new_document(args, config_path: Path) -> int:
    """
    Create a new document in the current directory from the parsed CLI args.
    """
    request = NewDocumentRequest(
        filename=args.filename,
        author=args.author,
        overwrite=args.overwrite,
        enrich=args.enrich,
        open_after=args.open,
        save_config=args.save_config,
    )
    result = run(
        request,
        config_path=config_path,
        cwd=Path.cwd(),
        opener=SystemOpener() if args.open else None,
    )
    print(f"Created {result.path}")
    if result.config_saved:
        print(f"Saved defaults to {config_path}")
    return 0


def register(parser):
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME,
                        help="Name of the new document; a suffix overrides the configured extension.")
    parser.add_argument("-o", "--overwrite", action="store_true",
                        help="Overwrite the document if it already exists.")
    parser.add_argument("-a", "--author", help="Author to stamp (overrides the config).")
    parser.add_argument("-p", "--open", action="store_true",
                        help="Open the new document with the default application.")
    parser.add_argument("-e", "--enrich", action="store_true",
                        help="Add the rich metadata fields from the config.")
    parser.add_argument("-s", "--save-config", action="store_true",
                        help="Store the resolved author/extension/header/footer as the new defaults.")
