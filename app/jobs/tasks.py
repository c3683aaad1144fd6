"""Background job tasks"""

from datetime import datetime
import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.jobs.celery_app import celery_app
from app.config import settings

logger = structlog.get_logger()


def run_async(coro):
    """Helper to run async functions in sync context"""
    return asyncio.run(coro)


def build_reset_email(to_email: str, reset_url: str) -> MIMEMultipart:
    msg = MIMEMultipart()
    msg["From"] = settings.from_email
    msg["To"] = to_email
    msg["Subject"] = "Reset your password"

    body = f"""
Hi,

We received a request to reset your password. Use the link below:

{reset_url}

This link will expire in {settings.reset_token_expire_minutes} minutes.

If you did not request a reset, you can ignore this email.
"""
    msg.attach(MIMEText(body, "plain"))
    return msg


@celery_app.task(name="send_password_reset")
def send_password_reset(to_email: str, reset_url: str):
    """Email a password reset link to an owner"""
    if not settings.smtp_host:
        logger.info("SMTP not configured, reset link not emailed", email=to_email, reset_url=reset_url)
        return

    msg = build_reset_email(to_email, reset_url)
    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port) as server:
            server.starttls()
            if settings.smtp_user:
                server.login(settings.smtp_user, settings.smtp_password)
            server.sendmail(settings.from_email, to_email, msg.as_string())
    except smtplib.SMTPException as e:
        logger.error("Failed to send password reset email", email=to_email, error=str(e))
        raise

    logger.info("Password reset email sent", email=to_email)


async def delete_expired_sessions(db: AsyncSession) -> int:
    """Remove sessions past their expiry; returns the number deleted"""
    from app.models.session import UserSession

    result = await db.execute(
        delete(UserSession).where(UserSession.expires_at <= datetime.utcnow())
    )
    await db.commit()
    return result.rowcount


@celery_app.task(name="prune_expired_sessions")
def prune_expired_sessions():
    """Periodic cleanup of the session table"""
    async def _prune():
        from app.database import SessionLocal

        async with SessionLocal() as db:
            deleted_count = await delete_expired_sessions(db)
            logger.info("Pruned expired sessions", deleted_count=deleted_count)

    run_async(_prune())
