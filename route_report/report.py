from datetime import datetime
from typing import Any, Optional

import structlog

from .config import (
    REPORT_FILENAME_TEMPLATE,
    REPORT_TITLE,
    SECTION_TITLE_SIZE,
    STAMP_FORMAT,
    STAMP_SIZE,
    STAMP_Y,
    TEXT_X,
    TITLE_SIZE,
    TITLE_Y,
)
from .layout import advance, start_cursor, table_start
from .logging import ensure_logging
from .normalize import normalize_input
from .renderer import DocumentRenderer, PDFRenderer, TableSpec
from .sections import build_sections

logger = structlog.get_logger(__name__)


def report_filename(now: datetime) -> str:
    return REPORT_FILENAME_TEMPLATE.format(date=now.date().isoformat())


def generate_report(raw: Any, renderer: Optional[DocumentRenderer] = None, *, now: Optional[datetime] = None):
    """
    Build the five-section risk report from ``raw`` and save it.

    Every call normalizes its own copy of the input and owns its layout
    cursor. Input problems degrade to placeholders; renderer and save errors
    propagate unchanged. Returns whatever the renderer's save returns.
    """
    ensure_logging()
    now = now or datetime.now()
    renderer = renderer if renderer is not None else PDFRenderer()
    data = normalize_input(raw)
    logger.info(
        "report_started",
        points=len(data.points),
        routes=len(data.routes),
        proposals=len(data.proposals),
    )
    try:
        renderer.set_text_size(TITLE_SIZE)
        renderer.draw_text(REPORT_TITLE, TEXT_X, TITLE_Y)
        renderer.set_text_size(STAMP_SIZE)
        renderer.draw_text(f"Generado: {now.strftime(STAMP_FORMAT)}", TEXT_X, STAMP_Y)

        cursor = start_cursor()
        for spec, section in build_sections(data):
            renderer.set_text_size(SECTION_TITLE_SIZE)
            renderer.draw_text(spec.title, TEXT_X, cursor.y)
            start_y = table_start(cursor)
            measured_end = renderer.render_table(
                TableSpec(start_y=start_y, header=section.header, body=section.body)
            )
            next_y = advance(cursor, spec, measured_end)
            logger.debug(
                "section_rendered",
                section=spec.id,
                rows=len(section.body),
                start_y=start_y,
                measured_end=measured_end,
                cursor=next_y,
            )

        filename = report_filename(now)
        result = renderer.persist_artifact(filename)
    except Exception as exc:
        logger.exception("report_failed", error=str(exc))
        raise
    logger.info("report_saved", filename=filename)
    return result
