"""Domain service: Order summary formatting.

Pure functions that turn a placed Order into the data both external
artifacts are built from: the receipt table rows and the messaging
text.  Every amount is taken from the Order as stored; nothing is
recomputed here, so a rendering can never drift from the snapshot.
"""

from __future__ import annotations

import re
import unicodedata
from urllib.parse import quote

from storefront.domain.model.order import Order

DEFAULT_SHARE_BASE_URL = "https://wa.me/"

RECEIPT_HEADER = ["Product", "Quantity", "Unit price", "Subtotal"]
RECEIPT_TOTAL_LABEL = "Order total"

# Characters encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"
_SEPARATOR = "-" * 24


def order_date(order: Order) -> str:
    return order.created_at.strftime("%Y-%m-%d")


def receipt_rows(order: Order) -> list[list[str]]:
    """Header, one row per line item, then the grand-total footer."""
    rows = [list(RECEIPT_HEADER)]
    for item in order.line_items:
        rows.append([
            item.name,
            str(item.quantity),
            str(item.unit_price),
            str(item.line_total),
        ])
    rows.append([RECEIPT_TOTAL_LABEL, "", "", str(order.total)])
    return rows


def receipt_filename(order: Order) -> str:
    """e.g. ``order-summer-sale-20261019-142501.pdf``."""
    label = _slugify(order.catalog_label or "") or "order"
    stamp = order.created_at.strftime("%Y%m%d-%H%M%S")
    if label == "order":
        return f"order-{stamp}.pdf"
    return f"order-{label}-{stamp}.pdf"


def build_share_message(order: Order) -> str:
    shipping = order.shipping_info
    lines = [
        "Hello! Here is my order summary:",
        "",
        f"*Customer:* {shipping.name}",
        f"*Address:* {shipping.address}",
        f"*Date:* {order_date(order)}",
        f"*Payment method:* {order.payment_method.label}",
        _SEPARATOR,
        "",
        "*Products:*",
    ]
    for item in order.line_items:
        lines.append(
            f"• {item.name} (x{item.quantity} @ {item.unit_price}) - {item.line_total}"
        )
    lines += [
        "",
        _SEPARATOR,
        f"*Order total: {order.total}*",
        "",
        "Thank you!",
    ]
    return "\n".join(lines)


def build_share_link(order: Order, base_url: str = DEFAULT_SHARE_BASE_URL) -> str:
    """Messaging deep link with the order summary pre-filled."""
    text = quote(build_share_message(order), safe=_URI_COMPONENT_SAFE)
    return f"{base_url}?text={text}"


def _slugify(value: str) -> str:
    ascii_value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    return re.sub(r"[^a-z0-9]+", "-", ascii_value.lower()).strip("-")
