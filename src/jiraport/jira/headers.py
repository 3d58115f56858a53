"""Header deduplication for Jira CSV exports.

Jira repeats a header once per value for multi-valued fields (``Watchers``,
``Labels``, issue links, ...). Row parsers key cells by header name, so the
repeats are renamed ``<header>_<n>`` before parsing and a map back to the
original names is kept for the label rules.
"""

import csv
import io
import logging
from collections import Counter
from pathlib import Path
from typing import Iterator, Optional, Union

from .models import DedupedHeaders, HeaderEntry, ImportFileError

logger = logging.getLogger(__name__)

DEDUPED_SEGMENT = "deduped"


def dedupe_header_names(headers: list[str]) -> list[HeaderEntry]:
    """
    Rename repeated headers so every name is unique.

    A header that appears once keeps its name. The i-th occurrence (0-based)
    of a header that appears several times becomes ``<header>_<i>``.
    """
    totals = Counter(headers)
    seen: Counter = Counter()
    entries = []
    for header in headers:
        if totals[header] > 1:
            entries.append(HeaderEntry(deduped=f"{header}_{seen[header]}", original=header))
            seen[header] += 1
        else:
            entries.append(HeaderEntry(deduped=header, original=header))
    return entries


def deduped_file_path(file_path: Union[str, Path]) -> Path:
    """Return the path of the sanitized copy, e.g. ``foo.csv`` -> ``foo.deduped.csv``."""
    path = Path(file_path)
    return path.with_name(f"{path.stem}.{DEDUPED_SEGMENT}{path.suffix}")


def _split_header(text: str) -> tuple[list[str], Optional[str]]:
    """
    Tokenize the header record and return it with the untouched remainder.

    Only the first CSV record is parsed, so quoted commas and quoted newlines
    in header names are honoured while data lines are never re-serialised.
    """
    lines = text.split("\n")
    consumed = 0

    def feed() -> Iterator[str]:
        nonlocal consumed
        for line in lines:
            consumed += 1
            yield line + "\n"

    reader = csv.reader(feed())
    try:
        headers = next(reader)
    except StopIteration:
        headers = []
    except csv.Error as e:
        raise ImportFileError(f"Malformed header row: {e}") from e

    if consumed >= len(lines):
        return headers, None
    # csv strips the \r of a CRLF line ending but the remainder keeps its own
    return headers, "\n".join(lines[consumed:])


def _format_header(headers: list[str], line_ending: str) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator=line_ending)
    writer.writerow(headers)
    return buffer.getvalue()


def dedupe_headers(file_path: Union[str, Path]) -> DedupedHeaders:
    """
    Write a copy of a CSV export whose header names are unique.

    Args:
        file_path: Path to the original export

    Returns:
        DedupedHeaders with the path of the copy and the header map

    Raises:
        ImportFileError: If the export cannot be read or the copy cannot be written
    """
    source = Path(file_path)
    try:
        # utf-8-sig drops the BOM Jira prepends to exports
        with source.open("r", encoding="utf-8-sig", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read export {source}: {e}")
        raise ImportFileError(f"Could not read export {source}: {e}") from e

    headers, remainder = _split_header(text)
    if not headers or headers == [""]:
        raise ImportFileError(f"Export {source} has no header row")

    header_map = dedupe_header_names(headers)
    renamed = [entry for entry in header_map if entry.deduped != entry.original]
    if renamed:
        logger.info(f"Renamed {len(renamed)} duplicate header(s) in {source.name}")

    first_line = text.split("\n", 1)[0]
    line_ending = "\r\n" if first_line.endswith("\r") else "\n"

    target = deduped_file_path(source)
    try:
        with target.open("w", encoding="utf-8", newline="") as handle:
            names = [entry.deduped for entry in header_map]
            if remainder is None:
                handle.write(_format_header(names, ""))
            else:
                handle.write(_format_header(names, line_ending))
                handle.write(remainder)
    except OSError as e:
        logger.error(f"Could not write deduplicated export {target}: {e}")
        raise ImportFileError(f"Could not write deduplicated export {target}: {e}") from e

    logger.debug(f"Wrote deduplicated export to {target}")
    return DedupedHeaders(file_path=target, header_map=header_map)
