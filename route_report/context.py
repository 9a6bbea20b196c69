from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass(frozen=True)
class Metric:
    """One KPI figure and its change versus the previous period (percent units)."""

    value: Any = None
    delta_pct: Any = None


@dataclass(frozen=True)
class Kpi:
    accidents: Metric = field(default_factory=Metric)
    victims: Metric = field(default_factory=Metric)
    improvements: Metric = field(default_factory=Metric)


@dataclass(frozen=True)
class Point:
    name: Any = None
    city: Any = None
    risk: Any = None
    probability: Any = None
    road_type: Any = None


@dataclass(frozen=True)
class Route:
    label: Any = None
    risk: Any = None
    score: Any = None


@dataclass(frozen=True)
class Cause:
    label: Any = None
    pct: Any = None


@dataclass(frozen=True)
class Temporal:
    critical_hours: Tuple[Any, ...] = ()
    causes: Tuple[Cause, ...] = ()


@dataclass(frozen=True)
class Proposal:
    title: Any = None
    priority: Any = None
    impact_pct: Any = None
    eta: Any = None
    cost: Any = None


@dataclass(frozen=True)
class NormalizedInput:
    """
    Fully defaulted report input. Collections are tuples and objects are
    records, so section builders never check for absence themselves.
    """

    points: Tuple[Point, ...] = ()
    routes: Tuple[Route, ...] = ()
    kpi: Kpi = field(default_factory=Kpi)
    temporal: Temporal = field(default_factory=Temporal)
    proposals: Tuple[Proposal, ...] = ()


Row = Tuple[str, ...]


@dataclass(frozen=True)
class Section:
    header: Tuple[str, ...]
    body: Tuple[Row, ...]


@dataclass
class LayoutCursor:
    """Running vertical offset for one report run. Never shared between runs."""

    y: float
