# fitpartner/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from fitpartner.models import User, WorkoutPartner, PartnerStatus
from fitpartner.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get_by_auth_id(self, auth_id: int) -> Optional[User]:
        stmt = select(User).where(User.auth_id == auth_id)
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(
        self,
        *,
        auth_id: int,
        email: str,
        name: str,
        username: str,
        height: float | None = None,
        weight: float | None = None,
    ) -> User:
        user = User(
            auth_id=auth_id, email=email, name=name, username=username, height=height, weight=weight
        )
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ValueError("profile_conflict")

class PartnerRepository(BaseRepository[WorkoutPartner]):
    model = WorkoutPartner

    def count_accepted(self, user_id: int) -> int:
        stmt = select(func.count()).select_from(WorkoutPartner).where(
            WorkoutPartner.user_id == user_id,
            WorkoutPartner.status == PartnerStatus.accepted,
        )
        return self.db.execute(stmt).scalar_one()

    def first_accepted(self, user_id: int) -> Optional[WorkoutPartner]:
        """Oldest accepted relation when there are several."""
        stmt = select(WorkoutPartner).where(
            WorkoutPartner.user_id == user_id,
            WorkoutPartner.status == PartnerStatus.accepted,
        ).order_by(WorkoutPartner.id.asc()).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()
