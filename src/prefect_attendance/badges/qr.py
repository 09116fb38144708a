"""Signed QR badges.

A badge encodes a JSON payload naming the prefect number and role; scanning
it at the kiosk marks attendance. The ``hash`` field is the base64 of the
fields joined with the shared secret, so badges printed by another system are
rejected.
"""

from __future__ import annotations

import base64
import io
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import qrcode

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import BADGE_SYSTEM, BADGE_TYPE
from ..core.exceptions import InvalidBadgeError


@dataclass(frozen=True)
class Badge:
    prefect_number: str
    role: str
    timestamp: Optional[str] = None


def _signature(prefect_number: str, role: str, timestamp: Optional[str], secret: str) -> str:
    if timestamp:
        raw = f"{prefect_number}_{role}_{timestamp}_{secret}"
    else:
        raw = f"{prefect_number}_{role}_{secret}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def build_badge_payload(prefect_number: str, role: str, *, secret: str, now: Optional[datetime] = None) -> str:
    prefect_number = require_non_empty(prefect_number, "Prefect number")
    role = require_non_empty(role, "Role")
    timestamp = (now or now_local()).isoformat(timespec="seconds")
    data = {
        "type": BADGE_TYPE,
        "prefectNumber": prefect_number,
        "role": role,
        "system": BADGE_SYSTEM,
        "timestamp": timestamp,
        "hash": _signature(prefect_number, role, timestamp, secret),
    }
    return json.dumps(data)


def parse_badge_payload(text: str, *, secret: str) -> Badge:
    """Validate a scanned payload. Payloads without a timestamp are accepted."""

    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise InvalidBadgeError("Unrecognized QR code") from e

    if not isinstance(data, dict) or data.get("type") != BADGE_TYPE:
        raise InvalidBadgeError("Unrecognized QR code")

    prefect_number = data.get("prefectNumber")
    role = data.get("role")
    if not prefect_number or not role:
        raise InvalidBadgeError("QR code is missing prefect number or role")

    timestamp = data.get("timestamp") or None
    if not all(isinstance(v, str) for v in (prefect_number, role, timestamp or "")):
        raise InvalidBadgeError("QR code fields must be text")

    if data.get("hash") != _signature(prefect_number, role, timestamp, secret):
        raise InvalidBadgeError("QR code signature mismatch")

    return Badge(prefect_number=prefect_number, role=role, timestamp=timestamp)


def render_badge_png(payload: str) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=10,
        border=2,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
