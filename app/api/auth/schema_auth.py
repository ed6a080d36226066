from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    type_user: str
    access_token: str
    token_type: str = "Bearer"


class RegistroRequest(BaseModel):
    """Cadastro de uma nova confeitaria (empresa + usuário administrador)."""
    nome_empresa: str = Field(..., min_length=2, max_length=100)
    telefone: Optional[str] = None
    email: Optional[EmailStr] = None
    nome: Optional[str] = None
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6, max_length=72)


class UserResponse(BaseModel):
    id: int
    username: str
    nome: Optional[str] = None
    type_user: str
    empresa_id: int

    model_config = ConfigDict(from_attributes=True)
