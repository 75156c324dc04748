from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Схема для ответа с данными пользователя"""
    id: str
    name: str
    email: EmailStr
    avatar_url: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class AuthPayload(BaseModel):
    """Ответ на успешный вход: токен и пользователь"""
    token: str
    token_type: str = "bearer"
    user: UserResponse

