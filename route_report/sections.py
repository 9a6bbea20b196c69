from dataclasses import dataclass
from typing import Callable, List, Tuple

from .config import PLACEHOLDER
from .context import Kpi, NormalizedInput, Point, Proposal, Route, Row, Section, Temporal
from .values import fraction_percent, percent, resolve

KPI_HEADER = ("Indicador", "Valor", "Variación")
ROUTES_HEADER = ("Ruta", "Riesgo", "Puntaje")
POINTS_HEADER = ("Ubicación", "Riesgo", "Probabilidad", "Tipo vía")
TEMPORAL_HEADER = ("Horario", "Causa", "Porcentaje")
PROPOSALS_HEADER = ("Título", "Prioridad", "Impacto", "Plazo", "Costo")


def placeholder_row(width: int) -> Row:
    return (PLACEHOLDER,) * width


def kpi_body(kpi: Kpi) -> Tuple[Row, ...]:
    rows = [
        ("Accidentes", kpi.accidents),
        ("Víctimas", kpi.victims),
        ("Mejoras", kpi.improvements),
    ]
    return tuple((label, resolve(m.value), percent(m.delta_pct)) for label, m in rows)


def routes_body(routes: Tuple[Route, ...]) -> Tuple[Row, ...]:
    if not routes:
        return (placeholder_row(len(ROUTES_HEADER)),)
    return tuple((resolve(r.label), resolve(r.risk), resolve(r.score)) for r in routes)


def points_body(points: Tuple[Point, ...]) -> Tuple[Row, ...]:
    if not points:
        return (placeholder_row(len(POINTS_HEADER)),)
    return tuple(
        (
            f"{resolve(p.name)} ({resolve(p.city)})",
            resolve(p.risk),
            fraction_percent(p.probability),
            resolve(p.road_type),
        )
        for p in points
    )


def temporal_body(temporal: Temporal) -> Tuple[Row, ...]:
    """
    Zip critical hours with causes by index. The shorter sequence is padded
    with placeholders up to the longer one's length.
    """
    hours = temporal.critical_hours
    causes = temporal.causes
    pair_len = max(len(hours), len(causes))
    if pair_len == 0:
        return (placeholder_row(len(TEMPORAL_HEADER)),)
    rows = []
    for i in range(pair_len):
        hour = resolve(hours[i]) if i < len(hours) else PLACEHOLDER
        if i < len(causes):
            label, pct = resolve(causes[i].label), percent(causes[i].pct)
        else:
            label, pct = PLACEHOLDER, PLACEHOLDER
        rows.append((hour, label, pct))
    return tuple(rows)


def proposals_body(proposals: Tuple[Proposal, ...]) -> Tuple[Row, ...]:
    if not proposals:
        return (placeholder_row(len(PROPOSALS_HEADER)),)
    return tuple(
        (
            resolve(p.title),
            resolve(p.priority),
            percent(p.impact_pct),
            resolve(p.eta),
            resolve(p.cost),
        )
        for p in proposals
    )


@dataclass(frozen=True)
class SectionSpec:
    """
    One titled table of the report.

    When the renderer cannot measure where the table ended, the next cursor
    is ``fallback_y``, taken as an absolute offset or, with
    ``fallback_relative``, as a step from the cursor the section started at.
    """

    id: str
    title: str
    header: Tuple[str, ...]
    build: Callable[[NormalizedInput], Tuple[Row, ...]]
    fallback_y: float
    fallback_relative: bool = True

    def section(self, data: NormalizedInput) -> Section:
        return Section(header=self.header, body=self.build(data))

    def default_cursor(self, cursor_y: float) -> float:
        return cursor_y + self.fallback_y if self.fallback_relative else self.fallback_y


SECTION_REGISTRY: List[SectionSpec] = [
    SectionSpec(
        "kpi",
        "Indicadores Clave (últimos 6 meses)",
        KPI_HEADER,
        lambda data: kpi_body(data.kpi),
        fallback_y=60,
        fallback_relative=False,
    ),
    SectionSpec("routes", "Rutas críticas", ROUTES_HEADER, lambda data: routes_body(data.routes), 30),
    SectionSpec("points", "Puntos críticos", POINTS_HEADER, lambda data: points_body(data.points), 30),
    SectionSpec(
        "temporal",
        "Horarios y causas principales",
        TEMPORAL_HEADER,
        lambda data: temporal_body(data.temporal),
        30,
    ),
    SectionSpec(
        "proposals",
        "Propuestas del Agente",
        PROPOSALS_HEADER,
        lambda data: proposals_body(data.proposals),
        30,
    ),
]


def build_sections(data: NormalizedInput) -> List[Tuple[SectionSpec, Section]]:
    """All five sections in report order, built but not rendered."""
    return [(spec, spec.section(data)) for spec in SECTION_REGISTRY]
