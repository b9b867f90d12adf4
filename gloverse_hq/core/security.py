from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from gloverse_hq.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed hash in configuration
        return False

def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)

def authenticate_operator(email: Optional[str], password: Optional[str]) -> bool:
    """Check credentials against the single configured operator"""
    if not email or not password:
        return False
    if email.strip().lower() != settings.OPERATOR_EMAIL.strip().lower():
        return False
    return verify_password(password, settings.OPERATOR_PASSWORD_HASH)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    """Create JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=15)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str):
    """Decode JWT access token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None

def create_session_token() -> str:
    """Signed value for the session cookie"""
    return create_access_token(
        data={"sub": settings.OPERATOR_EMAIL, "scope": "session"},
        expires_delta=timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)
    )

def is_valid_session(token: Optional[str]) -> bool:
    """A cookie that fails verification counts as no session at all"""
    if not token:
        return False
    payload = decode_access_token(token)
    if not payload:
        return False
    return payload.get("scope") == "session" and payload.get("sub") == settings.OPERATOR_EMAIL
