"""QR codes linking a table to the public menu"""

import base64
import io

import qrcode

from app.config import settings


def public_menu_url(restaurant_id) -> str:
    return f"{settings.domain.rstrip('/')}/customer/{restaurant_id}"


def qr_data_url(data: str) -> str:
    """Render `data` as a PNG QR code and return it as a data URL"""
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=4,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    buffer = io.BytesIO()
    qr.make_image(fill_color="black", back_color="white").save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"
