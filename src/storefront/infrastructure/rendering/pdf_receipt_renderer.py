"""reportlab-backed implementation of ReceiptRenderer.

Lays the receipt out as: title, customer block, order block, then a
single table (header row repeated on every page) that ends with the
grand-total row.  Table content comes from ``receipt_rows`` so the PDF
shows exactly what the Order stores.
"""

from __future__ import annotations

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from storefront.domain.model.order import Order
from storefront.domain.service.order_summary import order_date, receipt_rows
from storefront.domain.service.receipt_renderer import ReceiptRenderer

TITLE = "Order Receipt"
FOOTER_TEXT = "Thank you for your purchase!"
HEADER_COLOR = colors.Color(22 / 255, 163 / 255, 74 / 255)


class PdfReceiptRenderer(ReceiptRenderer):

    def __init__(self, page_compression: bool | None = None) -> None:
        self._page_compression = page_compression

    def render(self, order: Order) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            title=TITLE,
            leftMargin=14 * mm,
            rightMargin=14 * mm,
            topMargin=16 * mm,
            bottomMargin=20 * mm,
            invariant=True,
            pageCompression=self._page_compression,
        )
        doc.build(
            self._story(order),
            onFirstPage=self._draw_footer,
            onLaterPages=self._draw_footer,
        )
        return buffer.getvalue()

    # --- Layout ---------------------------------------------------------------

    def _story(self, order: Order) -> list:
        styles = getSampleStyleSheet()
        shipping = order.shipping_info

        customer = [
            Paragraph("Customer", styles["Heading3"]),
            Paragraph(f"Name: {escape(shipping.name)}", styles["Normal"]),
            Paragraph(f"Address: {escape(shipping.address)}", styles["Normal"]),
            Paragraph(f"Email: {escape(shipping.email)}", styles["Normal"]),
            Paragraph(f"Phone: {escape(shipping.phone)}", styles["Normal"]),
        ]
        details = [
            Paragraph("Order details", styles["Heading3"]),
            Paragraph(f"Date: {order_date(order)}", styles["Normal"]),
            Paragraph(f"Payment method: {order.payment_method.label}", styles["Normal"]),
            Paragraph(f"Total: {order.total}", styles["Normal"]),
        ]
        blocks = Table([[customer, details]], colWidths=["50%", "50%"])
        blocks.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))

        return [
            Paragraph(TITLE, styles["Title"]),
            blocks,
            Spacer(1, 8 * mm),
            self._items_table(order),
        ]

    @staticmethod
    def _items_table(order: Order) -> Table:
        rows = receipt_rows(order)
        table = Table(
            rows,
            colWidths=["46%", "14%", "20%", "20%"],
            repeatRows=1,
        )
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("ALIGN", (1, 0), (-1, -1), "CENTER"),
            ("ALIGN", (0, 0), (0, -1), "LEFT"),
            ("GRID", (0, 0), (-1, -2), 0.25, colors.grey),
            ("LINEABOVE", (0, -1), (-1, -1), 1, colors.black),
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("SPAN", (0, -1), (2, -1)),
        ]))
        return table

    @staticmethod
    def _draw_footer(canvas, doc) -> None:
        canvas.saveState()
        canvas.setFont("Helvetica", 9)
        canvas.drawCentredString(A4[0] / 2, 10 * mm, FOOTER_TEXT)
        canvas.restoreState()
