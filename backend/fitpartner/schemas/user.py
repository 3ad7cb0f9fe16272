from typing import Annotated
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from datetime import datetime

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
UsernameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=60)]
# cm / kg
BodyMetric = Annotated[float, Field(gt=0, le=1000)]

class ProfileBase(BaseModel):
    name: NameStr
    username: UsernameStr
    height: BodyMetric | None = None
    weight: BodyMetric | None = None

class UserRegister(ProfileBase):
    email: EmailStr = Field(max_length=255)
    # no regex here—Pydantic v2 core regex doesn't support look-arounds
    password: Annotated[str, Field(min_length=12, max_length=128)]

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        # OWASP-ish: require lower, upper, digit, special
        if not any(c.islower() for c in v):
            raise ValueError("password must include a lowercase letter")
        if not any(c.isupper() for c in v):
            raise ValueError("password must include an uppercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("password must include a digit")
        if not any(not c.isalnum() for c in v):
            raise ValueError("password must include a special character")
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class UserRead(ProfileBase):
    id: int
    auth_id: int
    email: EmailStr
    created_at: datetime
    model_config = {"from_attributes": True}

class SessionRead(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    expires_at: datetime

class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead | None = None
