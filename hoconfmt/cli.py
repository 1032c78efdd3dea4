from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .models import FormatOptions
from .process import report_errors, run
from .rules import CONF_SUFFIX


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hoconfmt",
        description="Normalize the leading indentation of HOCON .conf files.",
    )
    # main operation modes
    p.add_argument("-l", dest="list", action="store_true",
                   help="list files whose formatting differs from hoconfmt's")
    p.add_argument("-w", dest="write", action="store_true",
                   help="write result to (source) file instead of stdout")
    p.add_argument("-d", dest="diff", action="store_true",
                   help="display diffs instead of writing files")
    p.add_argument("-e", dest="all_errors", action="store_true",
                   help="report all errors (not just the first 10)")

    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    p.add_argument("--suffix", default=CONF_SUFFIX,
                   help=f"file suffix to format when walking directories (default: {CONF_SUFFIX})")
    p.add_argument("paths", nargs="*", metavar="path",
                   help="files or directories; standard input if none")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="hoconfmt: %(message)s",
    )

    options = FormatOptions(
        list=args.list,
        write=args.write,
        diff=args.diff,
        all_errors=args.all_errors,
    )

    result = run(args.paths, options, sys.stdin.buffer, sys.stdout.buffer, suffix=args.suffix)
    sys.stdout.flush()
    report_errors(result, options)
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
