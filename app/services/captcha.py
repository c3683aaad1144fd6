"""Google reCAPTCHA token verification"""

from typing import Optional

import httpx
from fastapi import HTTPException
import structlog

from app.config import settings

logger = structlog.get_logger()


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=10.0)


async def verify_captcha_token(token: str, remote_ip: Optional[str] = None) -> dict:
    """
    Check a reCAPTCHA token with Google's siteverify endpoint.

    Returns Google's verdict unchanged (`success`, `challenge_ts`,
    `hostname`, `error-codes`). Raises 503 when no secret is configured and
    502 when Google cannot be reached or answers with an error.
    """
    if not settings.recaptcha_secret:
        logger.warning("reCAPTCHA secret not configured")
        raise HTTPException(status_code=503, detail="reCAPTCHA is not configured")

    form = {"secret": settings.recaptcha_secret, "response": token}
    if remote_ip:
        form["remoteip"] = remote_ip

    try:
        async with _client() as client:
            response = await client.post(settings.recaptcha_verify_url, data=form)
            response.raise_for_status()
            data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error("reCAPTCHA verification failed", error=str(e))
        raise HTTPException(status_code=502, detail="Failed to verify reCAPTCHA")

    logger.info("reCAPTCHA verified", success=data.get("success"), hostname=data.get("hostname"))
    return data
