import pytest

from route_report.context import Cause, Kpi, Metric, NormalizedInput, Point, Temporal
from route_report.normalize import normalize_input


@pytest.mark.parametrize(
    "raw",
    [
        None,
        {},
        42,
        "points",
        [1, 2, 3],
        {"points": None, "routes": None, "kpi": None, "temporal": None, "proposals": None},
        {"points": "abc", "routes": {"a": 1}, "kpi": [1], "temporal": "x", "proposals": 7},
        {"temporal": {"criticalHours": "08:00", "causes": {"label": "x"}}},
    ],
)
def test_normalize_is_total_and_fully_defaulted(raw) -> None:
    data = normalize_input(raw)
    assert isinstance(data, NormalizedInput)
    assert data.points == ()
    assert data.routes == ()
    assert data.proposals == ()
    assert data.kpi == Kpi()
    assert data.temporal == Temporal()


def test_normalize_maps_entry_fields(full_payload) -> None:
    data = normalize_input(full_payload)
    assert data.points[0] == Point(
        name="Cruce Norte", city="Santiago", risk="alto", probability=0.345, road_type="autopista"
    )
    assert [r.label for r in data.routes] == ["Ruta 5", "Ruta 68"]
    assert data.kpi.accidents == Metric(value=120, delta_pct=-4)
    assert data.temporal.critical_hours == ("07:00-09:00", "18:00-20:00")
    assert data.temporal.causes == (Cause(label="Exceso de velocidad", pct=41),)
    assert data.proposals[0].impact_pct == 15


def test_non_mapping_entries_become_empty_records() -> None:
    data = normalize_input({"points": [None, "x", {"name": "A"}], "kpi": {"victims": 3}})
    assert data.points == (Point(), Point(), Point(name="A"))
    assert data.kpi.victims == Metric()


def test_tuples_are_accepted_as_sequences() -> None:
    data = normalize_input({"routes": ({"label": "R"},)})
    assert data.routes[0].label == "R"
