"""
Authentication endpoints for user signup and login.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from studybuddy.core.dependencies import get_current_user, get_db
from studybuddy.core.exceptions import ValidationError
from studybuddy.core.security import create_access_token, get_password_hash, verify_password
from studybuddy.models.user import User
from studybuddy.schemas.user import AuthResponse, User as UserSchema, UserCreate, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter()

MIN_PASSWORD_LENGTH = 6


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user_in: UserCreate, db: Session = Depends(get_db)) -> Any:
    """
    Register a new user and log them in.

    Args:
        user_in: Name, email and password
        db: Database session

    Returns:
        Access token and the created user

    Raises:
        ValidationError: Missing fields, short password or email already registered
    """
    name = (user_in.name or "").strip()
    if not name or not user_in.email or not user_in.password:
        raise ValidationError("All fields are required")

    if len(user_in.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    email = str(user_in.email).lower()
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("Email already registered")

    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(user_in.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"User {user.id} signed up")
    return {"token": create_access_token(subject=user.id), "user": user}


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)) -> Any:
    """
    Login user and return JWT token.

    Raises:
        ValidationError: Email or password missing
        HTTPException: If credentials are invalid
    """
    if not credentials.email or not credentials.password:
        raise ValidationError("Email and password are required")

    user = db.query(User).filter(User.email == credentials.email.strip().lower()).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {"token": create_access_token(subject=user.id), "user": user}


@router.get("/me", response_model=UserSchema)
def read_current_user(current_user: User = Depends(get_current_user)) -> Any:
    """
    Get current authenticated user.
    """
    return current_user
