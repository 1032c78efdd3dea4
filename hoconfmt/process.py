"""
File processing driver.

Reads a document, formats it and dispatches to the configured output
action(s). Batch processing walks directories and collects one outcome
per file into a BatchResult; a failing file never stops the batch.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator, Optional

from .diff import unified_diff
from .errors import (
    DiffError,
    FormatError,
    HoconfmtError,
    ReadError,
    SkippedFile,
    UsageError,
    WriteBackError,
)
from .models import BatchResult, FileOutcome, FormatOptions
from .normalize import format_source
from .rules import CONF_SUFFIX, DIFF_PREFIX, FILE_MODE, MAX_REPORTED_ERRORS, STDIN_NAME

logger = logging.getLogger(__name__)


def is_conf_file(path: Path, suffix: str = CONF_SUFFIX) -> bool:
    # ignore non .conf files and hidden files; symlinked files are followed,
    # symlinked directories are not descended (os.walk default)
    name = path.name
    return path.is_file() and not name.startswith(".") and name.endswith(suffix)


def walk_dir(
    root: Path,
    suffix: str = CONF_SUFFIX,
    onerror: Optional[Callable[[OSError], None]] = None,
) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if is_conf_file(path, suffix):
                yield path


def _read_source(filename: str, reader: Optional[BinaryIO]) -> bytes:
    if reader is not None:
        try:
            return reader.read()
        except OSError as e:
            raise ReadError(f"{filename}: {e}") from e

    try:
        f = open(filename, "rb")
    except OSError as e:
        raise SkippedFile(f"{filename}: {e}") from e

    with f:
        try:
            return f.read()
        except OSError as e:
            raise ReadError(f"{filename}: {e}") from e


def _write_back(filename: str, data: bytes) -> None:
    try:
        fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteBackError(f"{filename}: {e}") from e


def process_file(
    filename: str,
    reader: Optional[BinaryIO],
    writer: BinaryIO,
    options: FormatOptions,
) -> bool:
    """
    Format one document and act on the result.

    If reader is None the named file is opened. Returns True when
    formatting changed the content. Raises SkippedFile if the file
    cannot be opened, ReadError, WriteBackError or DiffError on failure.
    """
    src = _read_source(filename, reader)

    try:
        res = format_source(src)
    except FormatError as e:
        logger.debug("%s: formatting failed, leaving unchanged: %s", filename, e)
        return False

    changed = src != res
    if changed:
        if options.list:
            writer.write(os.fsencode(filename) + b"\n")
        if options.write:
            _write_back(filename, res)
        if options.diff:
            try:
                data = unified_diff(src, res, filename)
            except (ValueError, TypeError) as e:
                raise DiffError(f"computing diff: {e}") from e
            name = os.fsencode(filename)
            writer.write(b"diff " + name + b" " + os.fsencode(DIFF_PREFIX) + b"/" + name + b"\n")
            writer.write(data)

    if options.prints_result:
        writer.write(res)
    return changed


def _process_one(
    filename: str,
    reader: Optional[BinaryIO],
    writer: BinaryIO,
    options: FormatOptions,
) -> FileOutcome:
    try:
        changed = process_file(filename, reader, writer, options)
    except SkippedFile as e:
        logger.warning("skipping %s", e)
        return FileOutcome(path=filename, skipped=True)
    except (HoconfmtError, OSError) as e:
        return FileOutcome(path=filename, error=str(e))
    return FileOutcome(path=filename, changed=changed)


def report_errors(result: BatchResult, options: FormatOptions) -> None:
    failed = [o for o in result.outcomes if o.error is not None]
    shown = failed if options.all_errors else failed[:MAX_REPORTED_ERRORS]
    for outcome in shown:
        logger.error("%s", outcome.error)
    if len(failed) > len(shown):
        logger.error("(%d more errors)", len(failed) - len(shown))


def run(
    paths: Iterable[str],
    options: FormatOptions,
    stdin: BinaryIO,
    stdout: BinaryIO,
    suffix: str = CONF_SUFFIX,
) -> BatchResult:
    """
    Process every path; directories are walked for suffix files.

    With no paths a single document is read from stdin.
    """
    result = BatchResult()
    paths = list(paths)

    if not paths:
        if options.write:
            err = UsageError("cannot use -w with standard input")
            result.outcomes.append(FileOutcome(path=STDIN_NAME, error=str(err)))
        else:
            result.outcomes.append(_process_one(STDIN_NAME, stdin, stdout, options))
        return result

    def unreadable_dir(e: OSError) -> None:
        result.outcomes.append(FileOutcome(path=e.filename or "", error=str(e)))

    for arg in paths:
        path = Path(arg)
        if path.is_dir():
            for conf in walk_dir(path, suffix, onerror=unreadable_dir):
                result.outcomes.append(_process_one(str(conf), None, stdout, options))
        else:
            result.outcomes.append(_process_one(arg, None, stdout, options))

    return result
