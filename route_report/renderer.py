from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence

from fpdf import FPDF, XPos, YPos
from fpdf.fonts import FontFace

from .config import PAGE_FORMAT, PAGE_MARGIN, REPORT_TITLE, TABLE_TEXT_SIZE, resolve_report_dir
from .values import pdf_safe_text

PALETTE = {
    "primary": (41, 128, 185),
    "muted": (120, 120, 120),
    "panel": (245, 246, 248),
}


@dataclass(frozen=True)
class TableSpec:
    start_y: float
    header: Sequence[str]
    body: Sequence[Sequence[str]]


class DocumentRenderer(Protocol):
    """Drawing and persistence surface the report assembler talks to."""

    def set_text_size(self, points: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def render_table(self, spec: TableSpec) -> Optional[float]: ...

    def persist_artifact(self, filename: str): ...


class ReportPDF(FPDF):
    def __init__(self, header_title: str):
        super().__init__(orientation="P", unit="mm", format=PAGE_FORMAT)
        self.header_title = header_title

    def header(self):
        if self.page_no() == 1:
            return
        self.set_text_color(60, 60, 60)
        self.set_font("Helvetica", "B", 9)
        self.cell(0, 5, pdf_safe_text(self.header_title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_draw_color(200, 200, 200)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.ln(3)
        self.set_text_color(0, 0, 0)

    def footer(self):
        self.set_y(-12)
        self.set_text_color(*PALETTE["muted"])
        self.set_font("Helvetica", "", 8)
        self.cell(0, 4, pdf_safe_text(f"Página {self.page_no()}"), new_x=XPos.RIGHT, new_y=YPos.TOP, align="R")
        self.set_text_color(0, 0, 0)


class PDFRenderer:
    """
    fpdf2 implementation of DocumentRenderer. Coordinates are millimetres
    from the top-left corner of the current page.
    """

    def __init__(self, output_dir: Optional[Path] = None, title: str = REPORT_TITLE):
        self.output_dir = output_dir or resolve_report_dir()
        self.pdf = ReportPDF(title)
        self.pdf.set_margins(PAGE_MARGIN, PAGE_MARGIN, PAGE_MARGIN)
        self.pdf.set_auto_page_break(auto=True, margin=16)
        self.pdf.set_title(pdf_safe_text(title))
        self.pdf.add_page()
        self.pdf.set_font("Helvetica", "", TABLE_TEXT_SIZE)

    def set_text_size(self, points: float) -> None:
        self.pdf.set_font_size(points)

    def draw_text(self, text: str, x: float, y: float) -> None:
        self.pdf.text(x, y, pdf_safe_text(text))

    def render_table(self, spec: TableSpec) -> Optional[float]:
        """Draw the table from ``spec.start_y`` and return where it ended."""
        if not spec.header or not spec.body:
            return None
        pdf = self.pdf
        text_size = pdf.font_size_pt
        pdf.set_font_size(TABLE_TEXT_SIZE)
        pdf.set_y(spec.start_y)
        headings = FontFace(emphasis="BOLD", color=255, fill_color=PALETTE["primary"])
        with pdf.table(
            headings_style=headings,
            cell_fill_color=PALETTE["panel"],
            cell_fill_mode="ROWS",
        ) as table:
            for data_row in [spec.header, *spec.body]:
                row = table.row()
                for datum in data_row:
                    row.cell(pdf_safe_text(datum))
        pdf.set_font_size(text_size)
        return pdf.get_y()

    def persist_artifact(self, filename: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / filename
        self.pdf.output(str(path))
        return path
