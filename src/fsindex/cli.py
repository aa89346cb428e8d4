# src/fsindex/cli.py
import sys
import argparse
import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

# Module imports
from fsindex.config import DEFAULT_BLACKLIST, DEFAULT_IGNORE_FILE, DEFAULT_IGNORE_PATTERNS, PREVIEW_ROWS
from fsindex.core.ignore import load_ignore_spec
from fsindex.core.scanner import DirectoryScanner, is_folder
from fsindex.models import FileRecord
from fsindex.utils.paths import get_enclosing_folder_path, get_folder_name_from_path
from fsindex.utils.storage import create_directory, save_json_file
from fsindex.utils.transfer import copy_files, plan_transfers


def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="List the files in a directory tree, index them in discovery order, and export or copy the result."
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=os.getcwd(), help="Directory to list")
    parser.add_argument("-r", "--recursive", action="store_true", help="Descend into subdirectories")
    parser.add_argument("-e", "--extensions", type=str, default="*", help="Comma-separated file extensions or '*' for all")
    parser.add_argument(
        "-i", "--ignore",
        type=str,
        default=",".join(DEFAULT_BLACKLIST),
        help="Comma-separated file names to skip (default: %(default)s)"
    )
    parser.add_argument(
        "--ignore-file",
        type=str,
        default=None,
        help=f"gitignore-style rules file (default: ROOT/{DEFAULT_IGNORE_FILE} if present)"
    )
    parser.add_argument("-o", "--output", type=str, default=None, help="Save the listing as JSON to this file")
    parser.add_argument("--copy-to", type=str, default=None, help="Copy the listed files into this directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_name_list(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def resolve_ignore_file(root_dir: str, ignore_file: Optional[str]) -> Path:
    if ignore_file:
        return Path(ignore_file)
    return Path(root_dir) / DEFAULT_IGNORE_FILE


def print_summary(files: List[FileRecord]):
    print(f"\n--- First {min(len(files), PREVIEW_ROWS)} Files ---")
    print(f"{'Index':<6} | {'Ext':<8} | {'Path'}")
    print("-" * 60)
    for f in files[:PREVIEW_ROWS]:
        print(f"{f.index:<6} | {f.extension or '-':<8} | {f.relative_path}")
    print("-" * 60)
    print(f"Total files: {len(files)}")


async def run(args) -> None:
    root_dir = args.root_dir
    raw_exts = args.extensions.strip()
    extensions = None if raw_exts == "*" else set(parse_name_list(raw_exts))
    ignore_names = parse_name_list(args.ignore)

    ignore_file = resolve_ignore_file(root_dir, args.ignore_file)
    if ignore_file.exists():
        ignore_spec = load_ignore_spec(ignore_file)
    else:
        ignore_spec = load_ignore_spec(None, extra_patterns=list(DEFAULT_IGNORE_PATTERNS))

    print(f"--- fsindex ---")
    print(f"Scanning: {root_dir} ({'recursive' if args.recursive else 'top level only'})")
    print(f"Mode:     {'All files' if extensions is None else f'Extensions {sorted(extensions)}'}")

    scanner = DirectoryScanner(
        root_dir,
        recursive=args.recursive,
        extensions=extensions,
        ignore_files=ignore_names,
        ignore_spec=ignore_spec,
    )
    files = await scanner.scan()

    if not files:
        print("No matching files found.")
        return

    print_summary(files)

    if args.output:
        output_dir = get_enclosing_folder_path(args.output)
        output_name = get_folder_name_from_path(args.output)
        await save_json_file(output_dir, output_name, [f.to_dict() for f in files])
        print(f"Listing written to: {args.output}")

    if args.copy_to:
        transfers = plan_transfers(files, args.copy_to, root_dir, action_reason="listed by fsindex")
        for t in transfers:
            await create_directory(get_enclosing_folder_path(t.destination))
        await copy_files(transfers)
        print(f"Copied {len(transfers)} files to: {args.copy_to}")


def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        if not is_folder(args.root_dir):
            print(f"Error: Invalid directory '{args.root_dir}'", file=sys.stderr)
            sys.exit(1)

        # Only the implicit ROOT ignore file may be absent
        if args.ignore_file and not Path(args.ignore_file).is_file():
            print(f"Error: Ignore file not found '{args.ignore_file}'", file=sys.stderr)
            sys.exit(1)

        # 2. Listing, export and copy
        asyncio.run(run(args))

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
