from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from fitpartner.models import AuthIdentity, RevokedToken
from fitpartner.repositories.base import BaseRepository

class IdentityRepository(BaseRepository[AuthIdentity]):
    model = AuthIdentity

    def get_by_email(self, email: str) -> Optional[AuthIdentity]:
        stmt = select(AuthIdentity).where(func.lower(AuthIdentity.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, *, email: str, password_hash: str) -> AuthIdentity:
        identity = AuthIdentity(email=email, password_hash=password_hash)
        try:
            self.db.add(identity)
            self.db.commit()
            self.db.refresh(identity)
            return identity
        except IntegrityError:
            self.db.rollback()
            raise ValueError("email_already_exists")

class RevokedTokenRepository(BaseRepository[RevokedToken]):
    model = RevokedToken

    def is_revoked(self, jti: str) -> bool:
        stmt = select(RevokedToken.id).where(RevokedToken.jti == jti)
        return self.db.execute(stmt).first() is not None

    def revoke(self, jti: str) -> None:
        if self.is_revoked(jti):
            return
        self.db.add(RevokedToken(jti=jti))
        self.db.commit()
