import qrcode
import qrcode.image.pil
import qrcode.image.svg
import io
import json
import base64
import secrets
import string
import time
import uuid
from typing import Optional
import logging
from app.core.config import settings
from app.models.space import Space

logger = logging.getLogger(__name__)

QR_PAYLOAD_TYPE = "space"
_ID_ALPHABET = string.ascii_lowercase + string.digits

# Largest byte-mode payload a QR code can carry (version 40, level L)
QR_MAX_PAYLOAD_LENGTH = 2953

_IMAGE_FACTORIES = {
    "png": (qrcode.image.pil.PilImage, "image/png"),
    "svg": (qrcode.image.svg.SvgPathImage, "image/svg+xml"),
}


class InvalidQRCodeError(ValueError):
    """Raised when scanned text is not a space QR payload."""


def render_space_qr(space: Space, image_format: Optional[str] = None) -> str:
    """
    Render the space's stored QR payload as a data URI.

    image_format is "png" or "svg"; defaults to settings.QR_IMAGE_FORMAT.
    """
    image_format = (image_format or settings.QR_IMAGE_FORMAT).lower()
    if image_format not in _IMAGE_FACTORIES:
        raise ValueError(f"Unsupported QR image format: {image_format}")
    factory, mime_type = _IMAGE_FACTORIES[image_format]

    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=settings.QR_BOX_SIZE,
        border=settings.QR_BORDER,
        image_factory=factory,
    )
    qr.add_data(space.qr_code)
    qr.make(fit=True)

    buffer = io.BytesIO()
    qr.make_image().save(buffer)
    encoded = base64.b64encode(buffer.getvalue()).decode("utf-8")

    logger.debug(f"Rendered {image_format} QR for space {space.id} (version {qr.version})")
    return f"data:{mime_type};base64,{encoded}"


def generate_space_id() -> str:
    # Millisecond timestamp plus a random suffix keeps rapid creates distinct
    timestamp = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"space_{timestamp}_{suffix}"


def generate_item_id() -> str:
    return str(uuid.uuid4())


def build_qr_payload(space_id: str) -> str:
    return json.dumps({"spaceId": space_id, "type": QR_PAYLOAD_TYPE})


def parse_qr_payload(data: str) -> str:
    """
    Extract the space id from scanned QR text.

    Raises:
        InvalidQRCodeError: if the text is not JSON or is not a space payload
    """
    try:
        payload = json.loads(data)
    except (TypeError, ValueError, RecursionError):
        # Deeply nested arrays exhaust the JSON decoder's recursion limit
        logger.warning(f"Unparseable QR payload: {str(data)[:80]!r}")
        raise InvalidQRCodeError("This QR code format is not recognized.")

    if not isinstance(payload, dict):
        raise InvalidQRCodeError("This QR code is not valid for this app.")

    space_id = payload.get("spaceId")
    if payload.get("type") != QR_PAYLOAD_TYPE or not isinstance(space_id, str) or not space_id:
        logger.warning(f"QR payload is not a space code: {data[:80]!r}")
        raise InvalidQRCodeError("This QR code is not valid for this app.")

    return space_id
