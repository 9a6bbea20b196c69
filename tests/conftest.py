from typing import List, Optional

import pytest


class RecordingRenderer:
    """In-memory renderer that records every call in order."""

    def __init__(self, measured_ends: Optional[List[Optional[float]]] = None):
        self.measured_ends = list(measured_ends or [])
        self.calls: list = []
        self.tables: list = []

    def set_text_size(self, points):
        self.calls.append(("size", points))

    def draw_text(self, text, x, y):
        self.calls.append(("text", text, x, y))

    def render_table(self, spec):
        self.calls.append(("table", spec.start_y))
        self.tables.append(spec)
        return self.measured_ends.pop(0) if self.measured_ends else None

    def persist_artifact(self, filename):
        self.calls.append(("save", filename))
        return filename

    def texts(self):
        return [c for c in self.calls if c[0] == "text"]


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture
def full_payload():
    return {
        "points": [
            {
                "id": "p1",
                "name": "Cruce Norte",
                "lat": -33.4,
                "lng": -70.6,
                "risk": "alto",
                "probability": 0.345,
                "roadType": "autopista",
                "region": "RM",
                "city": "Santiago",
            },
        ],
        "routes": [
            {"id": "r1", "label": "Ruta 5", "risk": "alto", "score": 87},
            {"id": "r2", "label": "Ruta 68", "risk": "medio", "score": 54.5},
        ],
        "kpi": {
            "accidents": {"value": 120, "deltaPct": -4},
            "victims": {"value": 35, "deltaPct": 2.5},
            "improvements": {"value": 8, "deltaPct": 12},
        },
        "temporal": {
            "criticalHours": ["07:00-09:00", "18:00-20:00"],
            "causes": [{"label": "Exceso de velocidad", "pct": 41}],
        },
        "proposals": [
            {
                "id": "x1",
                "title": "Reductores de velocidad",
                "priority": "alta",
                "expectedImpactPct": 15,
                "eta": "2025-03",
                "cost": "USD 20k",
                "description": "",
                "techDetails": "",
            },
        ],
    }


@pytest.fixture
def make_renderer():
    return RecordingRenderer
