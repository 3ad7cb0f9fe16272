from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from fitpartner.db import get_db
from fitpartner.deps.auth import TokenClaims, get_optional_identity, get_token_claims
from fitpartner.errors import NotAuthenticated
from fitpartner.models import AuthIdentity
from fitpartner.schemas.user import LoginResponse, SessionRead, UserLogin, UserRead, UserRegister
from fitpartner.services import auth as auth_service
from fitpartner.repositories.user_repo import UserRepository

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    return auth_service.sign_up(db, email=payload.email, password=payload.password, profile=payload)

@router.post("/login", response_model=LoginResponse)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    token, identity = auth_service.sign_in(db, email=payload.email, password=payload.password)
    profile = UserRepository(db).get_by_auth_id(identity.id)
    return LoginResponse(access_token=token, user=UserRead.model_validate(profile) if profile else None)

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(db: Session = Depends(get_db), claims: Optional[TokenClaims] = Depends(get_token_claims)):
    if claims is None:
        raise NotAuthenticated()
    auth_service.sign_out(db, claims)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/session", response_model=Optional[SessionRead])
def session(claims: Optional[TokenClaims] = Depends(get_token_claims)):
    return auth_service.get_session(claims)

@router.get("/me", response_model=Optional[UserRead])
def me(db: Session = Depends(get_db), identity: Optional[AuthIdentity] = Depends(get_optional_identity)):
    return auth_service.get_current_user(db, identity)
