# app/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from passlib.context import CryptContext
from jose import jwt
from app.config.settings import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

if not SECRET_KEY or not isinstance(SECRET_KEY, str):
    raise RuntimeError("SECRET_KEY não configurada. Defina SECRET_KEY no .env ou variáveis de ambiente.")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compara senha em texto plano com o hash armazenado no banco."""
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """Gera hash bcrypt para armazenar no cadastro de usuário."""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({
        "exp": expire,
        # sub precisa ser string
        "sub": str(to_encode.get("sub", "")),
    })
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
