from route_report.config import INITIAL_CURSOR, SECTION_GAP
from route_report.layout import advance, start_cursor, table_start
from route_report.sections import SECTION_REGISTRY

SPECS = {spec.id: spec for spec in SECTION_REGISTRY}


def test_first_section_uses_fixed_initial_offset() -> None:
    cursor = start_cursor()
    assert cursor.y == INITIAL_CURSOR == 38
    assert table_start(cursor) == 42


def test_measured_end_advances_by_gap() -> None:
    cursor = start_cursor()
    assert advance(cursor, SPECS["kpi"], 97.5) == 97.5 + SECTION_GAP
    assert cursor.y == 107.5


def test_kpi_fallback_is_absolute() -> None:
    cursor = start_cursor()
    cursor.y = 200
    assert advance(cursor, SPECS["kpi"], None) == 60


def test_other_sections_fall_back_thirty_below_cursor() -> None:
    for sid in ("routes", "points", "temporal", "proposals"):
        cursor = start_cursor()
        cursor.y = 75
        assert advance(cursor, SPECS[sid], None) == 105, sid
        assert cursor.y == 105, sid


def test_cursors_are_independent_per_run() -> None:
    first = start_cursor()
    second = start_cursor()
    advance(first, SPECS["routes"], 150)
    assert second.y == INITIAL_CURSOR
