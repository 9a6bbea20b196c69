import logging
import os
from pathlib import Path

# Shown wherever a value is missing, null or NaN.
PLACEHOLDER = "dato no obtenido"

# Environment overrides.
ENV_REPORT_DIR = "REPORT_DIR"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FORMAT = "LOG_FORMAT"
LOG_FORMATS = ("console", "json")

# Output location and naming for generated PDFs.
DEFAULT_REPORT_DIR = Path(__file__).resolve().parent.parent / "reports"
REPORT_FILENAME_TEMPLATE = "reporte_rutas_{date}.pdf"

# Page geometry (mm, A4 portrait).
PAGE_FORMAT = "A4"
PAGE_MARGIN = 14
TEXT_X = 14

# Document header.
REPORT_TITLE = "Reporte de Riesgo y Accidentabilidad"
TITLE_SIZE = 18
TITLE_Y = 20
STAMP_SIZE = 10
STAMP_Y = 27
STAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"

# Section layout.
SECTION_TITLE_SIZE = 14
TABLE_TEXT_SIZE = 10
INITIAL_CURSOR = 38
TABLE_TITLE_GAP = 4
SECTION_GAP = 10


def resolve_report_dir() -> Path:
    """Directory for saved reports: $REPORT_DIR when set, else ./reports."""
    env_dir = os.getenv(ENV_REPORT_DIR, "").strip()
    if env_dir:
        return Path(env_dir)
    return DEFAULT_REPORT_DIR


def resolve_log_level() -> int:
    name = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def resolve_log_format() -> str:
    name = os.getenv(ENV_LOG_FORMAT, "").strip().lower()
    return name if name in LOG_FORMATS else "console"
