"""One-time notices carried across a redirect in a cookie."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Literal

from fastapi import Request, Response
from loguru import logger
from pydantic import BaseModel

from src.catalog.runtime.context import get_config

FlashKind = Literal["success", "error"]


class Flash(BaseModel):
    """A message shown once on the next rendered page."""

    kind: FlashKind
    message: str


def _cookie_name() -> str:
    return get_config().app.flash_cookie_name


def _encode(flash: Flash) -> str:
    # Unpadded so the value never needs cookie quoting
    raw = base64.urlsafe_b64encode(flash.model_dump_json().encode("utf-8"))
    return raw.rstrip(b"=").decode("ascii")


def _decode(raw: str) -> Flash | None:
    try:
        padded = raw + "=" * (-len(raw) % 4)
        payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        return Flash.model_validate(payload)
    except (binascii.Error, UnicodeError, ValueError) as e:
        logger.warning("Discarding malformed flash cookie: {}", e)
        return None


def set_flash(response: Response, kind: FlashKind, message: str) -> None:
    """Attach a notice to a redirect response."""
    response.set_cookie(
        key=_cookie_name(),
        value=_encode(Flash(kind=kind, message=message)),
        max_age=60,
        httponly=True,
        samesite="lax",
        path="/",
    )


def read_flash(request: Request) -> Flash | None:
    """Return the pending notice, if the request carries one."""
    raw = request.cookies.get(_cookie_name())
    if not raw:
        return None
    return _decode(raw)


def clear_flash(request: Request, response: Response) -> None:
    """Expire the notice cookie once its message has been rendered."""
    if _cookie_name() in request.cookies:
        response.delete_cookie(_cookie_name(), path="/")
