# fitpartner/deps/auth.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose.exceptions import ExpiredSignatureError, JWTError

from fitpartner.db import get_db
from fitpartner.errors import NotAuthenticated
from fitpartner.models import AuthIdentity, User
from fitpartner.repositories.identity_repo import IdentityRepository, RevokedTokenRepository
from fitpartner.repositories.user_repo import UserRepository
from fitpartner.security import decode_token

# Exposes Bearer auth in Swagger; login endpoint issues the token.
# auto_error=False so anonymous callers reach /auth/session and /auth/me.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

@dataclass(slots=True)
class TokenClaims:
    token: str
    payload: Dict[str, Any]

    @property
    def identity_id(self) -> int:
        return int(self.payload["sub"])

    @property
    def jti(self) -> str:
        return self.payload["jti"]

def get_token_claims(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[TokenClaims]:
    """None when no token was sent; 401 when one was sent but is unusable."""
    if token is None:
        return None
    try:
        payload = decode_token(token)
        if payload.get("sub") is None:
            raise NotAuthenticated()
    except ExpiredSignatureError:
        raise NotAuthenticated("Token expired")
    except JWTError:
        raise NotAuthenticated()

    if RevokedTokenRepository(db).is_revoked(payload["jti"]):
        raise NotAuthenticated()
    return TokenClaims(token=token, payload=payload)

def get_optional_identity(
    db: Session = Depends(get_db),
    claims: Optional[TokenClaims] = Depends(get_token_claims),
) -> Optional[AuthIdentity]:
    if claims is None:
        return None
    identity = IdentityRepository(db).get(claims.identity_id)
    if identity is None:
        raise NotAuthenticated()
    return identity

def get_current_identity(identity: Optional[AuthIdentity] = Depends(get_optional_identity)) -> AuthIdentity:
    if identity is None:
        raise NotAuthenticated()
    return identity

def get_current_user(
    db: Session = Depends(get_db),
    identity: AuthIdentity = Depends(get_current_identity),
) -> User:
    """The signed-in user's profile; every workout operation runs as this user."""
    user = UserRepository(db).get_by_auth_id(identity.id)
    if user is None:
        raise NotAuthenticated()
    return user
