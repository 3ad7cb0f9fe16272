"""Sign-up, sign-in and session helpers.

An account is two rows: the ``AuthIdentity`` holding the credentials and the
``User`` profile the rest of the application works with.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from fitpartner.deps.auth import TokenClaims
from fitpartner.errors import NotFound, ProfileCreationError
from fitpartner.models import AuthIdentity, User
from fitpartner.repositories.identity_repo import IdentityRepository, RevokedTokenRepository
from fitpartner.repositories.user_repo import UserRepository
from fitpartner.schemas.user import ProfileBase, SessionRead
from fitpartner.security import create_access_token, hash_password, verify_password

log = logging.getLogger(__name__)

def get_session(claims: Optional[TokenClaims]) -> Optional[SessionRead]:
    if claims is None:
        return None
    return SessionRead(
        access_token=claims.token,
        user_id=claims.identity_id,
        expires_at=datetime.fromtimestamp(claims.payload["exp"], tz=timezone.utc),
    )

def sign_up(db: Session, *, email: str, password: str, profile: ProfileBase) -> User:
    """Create the identity, then the profile.

    The identity is committed on its own; if the profile insert fails the
    identity stays and the caller gets ProfileCreationError.
    """
    identities = IdentityRepository(db)
    if identities.get_by_email(email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="email already registered")
    try:
        identity = identities.create(email=email, password_hash=hash_password(password))
    except ValueError as e:
        if str(e) == "email_already_exists":
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="email already registered")
        raise

    try:
        return UserRepository(db).create(
            auth_id=identity.id,
            email=email,
            name=profile.name,
            username=profile.username,
            height=profile.height,
            weight=profile.weight,
        )
    except ValueError as e:
        log.warning("profile insert failed for identity %s: %s", identity.id, e)
        raise ProfileCreationError(cause=e)

def sign_in(db: Session, *, email: str, password: str) -> tuple[str, AuthIdentity]:
    identity = IdentityRepository(db).get_by_email(email)
    if not identity or not verify_password(password, identity.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid credentials")
    return create_access_token(sub=str(identity.id)), identity

def sign_out(db: Session, claims: TokenClaims) -> None:
    RevokedTokenRepository(db).revoke(claims.jti)

def get_current_user(db: Session, identity: Optional[AuthIdentity]) -> Optional[User]:
    if identity is None:
        return None
    user = UserRepository(db).get_by_auth_id(identity.id)
    if user is None:
        raise NotFound("User profile not found")
    return user
