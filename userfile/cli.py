"""
Manage user records stored as a JSON array in a file.

Usage:
  userfile -operation add -fileName db.json -item '{"id":"1","email":"a@b.com","age":30}'
  userfile -operation list -fileName db.json
  userfile -operation findById -fileName db.json -id 1
  userfile -operation remove -fileName db.json -id 1
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from userfile.core.logs import configure_logging
from userfile.services.command_service import ALLOWED_OPERATIONS, build_arguments
from userfile.services.record_service import perform

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="userfile",
        description="Manage user records stored in a JSON file",
        allow_abbrev=False,
    )
    ap.add_argument("-operation", "--operation", default="", help=f"operation to be performed ({', '.join(ALLOWED_OPERATIONS)})")
    ap.add_argument("-fileName", "--fileName", default="", help="file name with user data")
    ap.add_argument("-item", "--item", default="", help="item to be created (JSON object)")
    ap.add_argument("-id", "--id", default="", help="person id")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    arguments = build_arguments(
        operation=args.operation,
        file_name=args.fileName,
        item=args.item,
        record_id=args.id,
    )
    out = sys.stdout.buffer
    try:
        perform(arguments, out)
        out.flush()
    except Exception as exc:
        log.debug("operation failed", exc_info=True)
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
