# app/core/admin_dependencies.py

from fastapi import Depends, HTTPException, status, Request
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.api.cadastros.models.user_model import UserModel
from app.api.auth.auth_repo import AuthRepository
from app.core.rls_context import definir_contexto
from app.core.security import SECRET_KEY, ALGORITHM
from app.database.db_connection import get_db, apply_rls_context
from app.utils.logger import logger

credentials_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Não autenticado",
    headers={"WWW-Authenticate": "Bearer"},
)

forbidden_exception = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Você não tem permissão para acessar este recurso",
)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> UserModel:
    """
    Recupera o usuário autenticado a partir do header Authorization (Bearer <token>)
    e aplica o contexto de empresa (tenant) na sessão.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        logger.warning("[AUTH] Cabeçalho Authorization ausente ou malformado.")
        raise credentials_exception

    access_token = auth_header.replace("Bearer ", "", 1)

    try:
        payload = jwt.decode(
            access_token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
        )
        raw_sub = payload.get("sub")
        if raw_sub is None:
            raise credentials_exception
        user_id = int(raw_sub)
    except (JWTError, ValueError) as e:
        logger.error(f"[AUTH] Erro ao decodificar JWT: {e}")
        raise credentials_exception

    user = AuthRepository(db).get_user_by_id(user_id)
    if not user or not user.ativo:
        raise credentials_exception

    definir_contexto(user.id, user.empresa_id)
    apply_rls_context(db, user.id, user.empresa_id)
    return user


def get_empresa_id(current_user: UserModel = Depends(get_current_user)) -> int:
    """Empresa (tenant) do usuário autenticado. Todos os dados admin são escopados por ela."""
    return current_user.empresa_id


def require_admin(current_user: UserModel = Depends(get_current_user)) -> UserModel:
    """Rotas que só podem ser acessadas por usuários type_user='admin'."""
    if current_user.type_user != "admin":
        logger.warning(
            "[AUTH] Acesso negado. type_user=%s tentou acessar rota admin.",
            current_user.type_user,
        )
        raise forbidden_exception
    return current_user
