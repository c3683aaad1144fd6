"""Authentication API endpoints and session dependencies"""

import secrets
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.security import APIKeyCookie
from jose import JWTError, jwt
from kombu.exceptions import OperationalError
from passlib.context import CryptContext
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
import structlog

from app.config import settings
from app.database import get_db
from app.models.restaurant import Restaurant
from app.models.session import UserSession
from app.models.user import User, UserRole
from app.schemas.auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    CaptchaRequest,
    ResetPasswordRequest,
    SessionUser,
    MessageResponse,
)
from app.schemas.restaurant import RestaurantResponse
from app.services.captcha import verify_captcha_token

router = APIRouter()
logger = structlog.get_logger()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Session cookie
session_cookie = APIKeyCookie(name=settings.session_cookie_name, auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def create_reset_token(user: User) -> str:
    """Create a short-lived JWT for the password reset link"""
    expire = datetime.utcnow() + timedelta(minutes=settings.reset_token_expire_minutes)
    payload = {
        "sub": str(user.id),
        "role": user.role.value,
        "exp": expire,
        "type": "reset",
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


async def create_session(
    db: AsyncSession,
    user: User,
    restaurant: Optional[Restaurant] = None,
) -> UserSession:
    """Persist a new login session for the user"""
    session = UserSession(
        id=secrets.token_urlsafe(32),
        user_id=user.id,
        user=user,
        role=user.role.value,
        name=user.name,
        restaurant_id=restaurant.id if restaurant else None,
        expires_at=datetime.utcnow() + timedelta(hours=settings.session_max_age_hours),
    )
    db.add(session)
    return session


def set_session_cookie(response: Response, session: UserSession) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.id,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


async def get_owner_restaurant(db: AsyncSession, user: User) -> Optional[Restaurant]:
    """First restaurant owned by the user, if any"""
    result = await db.execute(
        select(Restaurant)
        .where(Restaurant.owner_id == user.id)
        .order_by(Restaurant.created_at)
        .limit(1)
    )
    return result.scalar_one_or_none()


async def get_current_session(
    session_id: Optional[str] = Depends(session_cookie),
    db: AsyncSession = Depends(get_db),
) -> UserSession:
    """Resolve the session cookie to a live session"""
    not_authenticated = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )

    if not session_id:
        raise not_authenticated

    result = await db.execute(
        select(UserSession)
        .where(UserSession.id == session_id)
        .options(selectinload(UserSession.user))
    )
    session = result.scalar_one_or_none()

    if session is None:
        raise not_authenticated

    if session.is_expired:
        await db.delete(session)
        await db.commit()
        raise not_authenticated

    if session.user is None or not session.user.is_active:
        raise not_authenticated

    return session


async def get_current_user(
    session: UserSession = Depends(get_current_session),
) -> User:
    """Get the user behind the current session"""
    return session.user


def require_role(required_role: UserRole):
    """Dependency factory for role-based access control"""
    async def role_checker(session: UserSession = Depends(get_current_session)) -> UserSession:
        if session.role != required_role.value:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden",
            )
        return session
    return role_checker


async def require_owner(
    session: UserSession = Depends(require_role(UserRole.OWNER)),
) -> UserSession:
    """Owner session bound to a restaurant"""
    if session.restaurant_id is None:
        raise HTTPException(status_code=400, detail="No restaurant linked to this account")
    return session


def verify_restaurant_access(session: UserSession, restaurant_id: UUID) -> None:
    """Admins see every restaurant; owners only their own"""
    if session.role == UserRole.ADMIN.value:
        return

    if session.restaurant_id != restaurant_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied to this restaurant",
        )


def _session_user(user: User, restaurant: Optional[Restaurant]) -> SessionUser:
    return SessionUser(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        restaurant_id=restaurant.id if restaurant else None,
        restaurant_name=restaurant.name if restaurant else None,
    )


@router.post("/register", response_model=RegisterResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Register an owner account together with its restaurant"""
    email = request.email.lower()

    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none():
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        name=request.name,
        email=email,
        hashed_password=get_password_hash(request.password),
        role=UserRole.OWNER,
    )
    db.add(user)
    await db.flush()

    restaurant = Restaurant(
        owner_id=user.id,
        name=request.name,
        plan=request.plan.value,
        address=request.address,
        phone=request.phone,
        opening_hours=request.opening_hours,
        closing_hours=request.closing_hours,
        description=request.description,
        region=request.region,
        logo_url=request.logo_url,
    )
    db.add(restaurant)
    await db.flush()

    session = await create_session(db, user, restaurant)
    await db.commit()
    await db.refresh(restaurant)

    set_session_cookie(response, session)
    logger.info("Owner registered", user_id=str(user.id), restaurant_id=str(restaurant.id))

    return RegisterResponse(
        user=_session_user(user, restaurant),
        restaurant=RestaurantResponse.model_validate(restaurant),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Authenticate user and open a session"""
    result = await db.execute(select(User).where(User.email == request.email.lower()))
    user = result.scalar_one_or_none()

    if not user or not verify_password(request.password, user.hashed_password):
        logger.warning("Failed login", email=request.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User account is disabled",
        )

    restaurant = None
    if user.role == UserRole.OWNER:
        restaurant = await get_owner_restaurant(db, user)

    user.last_login = datetime.utcnow()
    session = await create_session(db, user, restaurant)
    await db.commit()

    set_session_cookie(response, session)
    logger.info("User logged in", user_id=str(user.id), role=user.role.value)

    return LoginResponse(user=_session_user(user, restaurant))


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    session_id: Optional[str] = Depends(session_cookie),
    db: AsyncSession = Depends(get_db),
):
    """Destroy the current session"""
    if session_id:
        await db.execute(delete(UserSession).where(UserSession.id == session_id))
        await db.commit()

    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=SessionUser)
async def get_current_user_info(
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Get current user information"""
    restaurant = None
    if session.restaurant_id:
        restaurant = await db.get(Restaurant, session.restaurant_id)
    return _session_user(session.user, restaurant)


@router.put("/change-password", response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Change the password of the logged-in user"""
    if not verify_password(request.old_password, user.hashed_password):
        raise HTTPException(status_code=400, detail="Old password is incorrect")

    user.hashed_password = get_password_hash(request.new_password)
    await db.commit()

    logger.info("Password changed", user_id=str(user.id))
    return MessageResponse(message="Password changed successfully")


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    db: AsyncSession = Depends(get_db),
):
    """Send a password reset link to a restaurant owner"""
    from app.jobs.tasks import send_password_reset

    result = await db.execute(select(User).where(User.email == request.email.lower()))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(status_code=404, detail="User not found.")

    if user.role == UserRole.ADMIN:
        raise HTTPException(status_code=403, detail="Unauthorized request for this email.")

    token = create_reset_token(user)
    reset_url = f"{settings.domain}/reset-password?token={token}"

    # Publishing to the broker blocks; keep it off the event loop
    try:
        await run_in_threadpool(send_password_reset.delay, user.email, reset_url)
    except OperationalError as e:
        logger.error("Failed to queue password reset email", user_id=str(user.id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to send reset email, try again later",
        )

    logger.info("Password reset requested", user_id=str(user.id))
    return MessageResponse(message="Password reset link has been sent to your email.")


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    db: AsyncSession = Depends(get_db),
):
    """Set a new password using a reset token"""
    invalid_token = HTTPException(status_code=400, detail="Invalid or expired reset token")

    try:
        payload = jwt.decode(
            request.token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
        user_id: str = payload.get("sub")
        token_type: str = payload.get("type")

        if user_id is None or token_type != "reset":
            raise invalid_token
        user_uuid = UUID(user_id)
    except (JWTError, ValueError):
        raise invalid_token

    user = await db.get(User, user_uuid)
    if user is None or not user.is_active:
        raise invalid_token

    user.hashed_password = get_password_hash(request.new_password)
    # Log out every existing session
    await db.execute(delete(UserSession).where(UserSession.user_id == user.id))
    await db.commit()

    logger.info("Password reset", user_id=str(user.id))
    return MessageResponse(message="Password has been reset")


@router.post("/verify-captcha")
async def verify_captcha(request: CaptchaRequest, http_request: Request):
    """Verify a reCAPTCHA token from the sign-up or login form"""
    remote_ip = http_request.client.host if http_request.client else None
    return await verify_captcha_token(request.token, remote_ip)
