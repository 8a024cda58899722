# pdf_report.py
import logging
import os
import tempfile

from fpdf import FPDF

logger = logging.getLogger(__name__)

REPORT_TITLE = "Khione Compressor Analysis Results"
REPORT_FILENAME = "Khione_Compressor_Analysis_Results.pdf"

MARGIN = 15
TITLE_GAP = 10
IMAGE_WIDTH = 60
IMAGE_GAP = 10
LINE_SPACING = 7


class ReferenceImage:
    """A decoded model picture ready to be placed in a report."""

    def __init__(self, data: bytes, width: int, height: int, image_format: str = "PNG"):
        self.data = data
        self.width = width
        self.height = height
        self.format = image_format

    def height_for(self, width: float) -> float:
        return self.height / self.width * width


class CompressorReport(FPDF):
    def __init__(self, compress=True):
        super().__init__(orientation='P', unit='mm', format='A4')
        self.set_auto_page_break(auto=False)
        self.set_margins(MARGIN, MARGIN, MARGIN)
        self.set_title(REPORT_TITLE)
        self.set_author("Khione Compressor Calculator")
        self.set_compression(compress)
        self.y_pos = MARGIN

    def safe_text(self, text):
        """Replace characters the core fonts cannot encode"""
        if text is None:
            return ""
        return str(text).encode('latin-1', 'replace').decode('latin-1')

    def add_title(self, title):
        self.set_font('helvetica', 'B', 18)
        title = self.safe_text(title)
        self.text((self.w - self.get_string_width(title)) / 2, self.y_pos, title)
        self.y_pos += TITLE_GAP

    def add_reference_image(self, image: ReferenceImage):
        height = image.height_for(IMAGE_WIDTH)
        with tempfile.NamedTemporaryFile(delete=False, suffix=f".{image.format.lower()}") as tmp_img:
            tmp_img.write(image.data)
            tmp_path = tmp_img.name
        try:
            self.image(tmp_path, x=(self.w - IMAGE_WIDTH) / 2, y=self.y_pos, w=IMAGE_WIDTH, h=height)
        finally:
            os.unlink(tmp_path)
        self.y_pos += height + IMAGE_GAP

    def add_field_lines(self, fields):
        self.set_font('helvetica', '', 12)
        for label, value in fields:
            if self.y_pos > self.h - MARGIN:
                self.add_page()
                self.y_pos = MARGIN
            self.text(MARGIN, self.y_pos, self.safe_text(f"{label}: {value}"))
            self.y_pos += LINE_SPACING


def generate_pdf_report(fields, image=None, compress=True) -> bytes:
    """
    Lay out the analysis report: title, optional model picture, then one
    line per display field.
    """
    pdf = CompressorReport(compress=compress)
    pdf.add_page()
    pdf.add_title(REPORT_TITLE)

    if image is not None:
        pdf.add_reference_image(image)
    else:
        pdf.y_pos += TITLE_GAP

    pdf.add_field_lines(fields)

    data = bytes(pdf.output())
    logger.info("Report rendered with %d fields (%s image)", len(fields),
                "with" if image is not None else "no")
    return data
