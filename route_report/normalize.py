from collections.abc import Mapping
from typing import Any, Callable, Tuple, TypeVar

from .context import Cause, Kpi, Metric, NormalizedInput, Point, Proposal, Route, Temporal

T = TypeVar("T")


def _record(raw: Any) -> Mapping:
    return raw if isinstance(raw, Mapping) else {}


def _sequence(raw: Any) -> Tuple[Any, ...]:
    # Strings and mappings are iterable but are never a list of entries.
    return tuple(raw) if isinstance(raw, (list, tuple)) else ()


def _entries(raw: Any, build: Callable[[Mapping], T]) -> Tuple[T, ...]:
    return tuple(build(_record(item)) for item in _sequence(raw))


def _metric(raw: Any) -> Metric:
    data = _record(raw)
    return Metric(value=data.get("value"), delta_pct=data.get("deltaPct"))


def _point(data: Mapping) -> Point:
    return Point(
        name=data.get("name"),
        city=data.get("city"),
        risk=data.get("risk"),
        probability=data.get("probability"),
        road_type=data.get("roadType"),
    )


def _route(data: Mapping) -> Route:
    return Route(label=data.get("label"), risk=data.get("risk"), score=data.get("score"))


def _cause(data: Mapping) -> Cause:
    return Cause(label=data.get("label"), pct=data.get("pct"))


def _proposal(data: Mapping) -> Proposal:
    return Proposal(
        title=data.get("title"),
        priority=data.get("priority"),
        impact_pct=data.get("expectedImpactPct"),
        eta=data.get("eta"),
        cost=data.get("cost"),
    )


def normalize_input(raw: Any) -> NormalizedInput:
    """
    Turn an untrusted payload into a NormalizedInput.
    Anything that is not a mapping where an object is expected, or not a
    list where a collection is expected, is treated as absent. Never raises.
    """
    data = _record(raw)
    kpi = _record(data.get("kpi"))
    temporal = _record(data.get("temporal"))
    return NormalizedInput(
        points=_entries(data.get("points"), _point),
        routes=_entries(data.get("routes"), _route),
        kpi=Kpi(
            accidents=_metric(kpi.get("accidents")),
            victims=_metric(kpi.get("victims")),
            improvements=_metric(kpi.get("improvements")),
        ),
        temporal=Temporal(
            critical_hours=_sequence(temporal.get("criticalHours")),
            causes=_entries(temporal.get("causes"), _cause),
        ),
        proposals=_entries(data.get("proposals"), _proposal),
    )
