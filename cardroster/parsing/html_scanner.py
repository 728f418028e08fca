"""Tolerant row/cell scanning of registration-site HTML tables.

Registration exports are loosely formed markup, so rows and cells are found
with regular expressions rather than a DOM parser. Everything above this
module only sees ``scan_rows`` and ``detect_table_shape``.
"""

import re
from typing import Iterator, List

from cardroster.models.enums import TableShape

ROW_PATTERN = re.compile(r"<tr[^>]*>(.*?)</tr>", re.IGNORECASE | re.DOTALL)
CELL_PATTERN = re.compile(r"<td[^>]*>(.*?)</td>", re.IGNORECASE | re.DOTALL)
ID_HEADER_PATTERN = re.compile(r"<t[hd][^>]*>\s*ID\s*</t[hd]>", re.IGNORECASE)
NUMERIC_ID_PATTERN = re.compile(r"[0-9]+")

_TAG_PATTERN = re.compile(r"<[^>]*>")
_NUMERIC_ENTITY_PATTERN = re.compile(r"&#\d+;")


def strip_html(fragment: str) -> str:
    """Removes markup and the few entities registration pages use."""
    text = _TAG_PATTERN.sub("", fragment)
    text = text.replace("&nbsp;", " ").replace("\xa0", " ")
    text = text.replace("&amp;", "&").replace("&quot;", '"')
    text = _NUMERIC_ENTITY_PATTERN.sub("", text)
    return text.strip()


def scan_cells(row_html: str) -> List[str]:
    return [strip_html(match.group(1)) for match in CELL_PATTERN.finditer(row_html)]


def scan_rows(html: str) -> Iterator[List[str]]:
    """Yields each table row as a list of stripped cell texts, in document order.

    Rows without a closing ``</tr>`` are never matched and so are skipped.
    """
    for row_match in ROW_PATTERN.finditer(html):
        yield scan_cells(row_match.group(1))


def detect_table_shape(html: str) -> TableShape:
    """Decides once per document whether rows carry an ID column.

    An explicit ``ID`` header cell wins; otherwise the first row with at least
    two cells is inspected and a purely numeric second cell means the table
    has an ID column. Anything else defaults to no ID column.
    """
    if ID_HEADER_PATTERN.search(html):
        return TableShape.HAS_ID_COLUMN

    for cells in scan_rows(html):
        if len(cells) < 2:
            continue
        if NUMERIC_ID_PATTERN.fullmatch(cells[1]):
            return TableShape.HAS_ID_COLUMN
        break

    return TableShape.NO_ID_COLUMN
