from typing import Optional

import structlog

from .config import INITIAL_CURSOR, SECTION_GAP, TABLE_TITLE_GAP
from .context import LayoutCursor
from .sections import SectionSpec

logger = structlog.get_logger(__name__)


def start_cursor() -> LayoutCursor:
    """Cursor for the first section, independent of any measurement."""
    return LayoutCursor(y=INITIAL_CURSOR)


def table_start(cursor: LayoutCursor) -> float:
    return cursor.y + TABLE_TITLE_GAP


def advance(cursor: LayoutCursor, spec: SectionSpec, measured_end: Optional[float]) -> float:
    """
    Move the cursor past the table just rendered for ``spec``.
    Uses the renderer's measured end plus the section gap when there is one,
    else the section's default offset.
    """
    if measured_end is not None:
        cursor.y = measured_end + SECTION_GAP
        return cursor.y
    fallback = spec.default_cursor(cursor.y)
    logger.debug("layout_fallback", section=spec.id, cursor=cursor.y, default=fallback)
    cursor.y = fallback
    return cursor.y
