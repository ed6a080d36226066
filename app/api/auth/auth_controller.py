# app/api/auth/auth_controller.py

from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.auth.auth_repo import AuthRepository
from app.api.auth.schema_auth import LoginRequest, RegistroRequest, TokenResponse, UserResponse
from app.api.cadastros.models.user_model import UserModel
from app.api.empresas.services.empresa_service import EmpresaService
from app.core.admin_dependencies import get_current_user
from app.core.security import verify_password, hash_password, create_access_token, ACCESS_TOKEN_EXPIRE_MINUTES
from app.database.db_connection import get_db
from app.utils.logger import logger
from app.utils.telefone import normalizar_telefone

router = APIRouter(tags=["auth"], prefix="/api/auth")


def _token_para(user: UserModel) -> TokenResponse:
    access_token = create_access_token(
        data={"sub": str(user.id), "empresa_id": user.empresa_id},
        expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return TokenResponse(type_user=user.type_user, access_token=access_token, token_type="Bearer")


@router.post("/token", response_model=TokenResponse)
def login_usuario(
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    repo = AuthRepository(db)
    user = repo.get_user_by_username(payload.username)
    if not user or not user.ativo or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciais inválidas",
            headers={"WWW-Authenticate": "Bearer"}
        )
    logger.info(f"[Auth] Login - user_id={user.id} empresa_id={user.empresa_id}")
    return _token_para(user)


@router.post("/registrar", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def registrar_empresa(
    payload: RegistroRequest,
    db: Session = Depends(get_db),
):
    """Cria a empresa (em período de teste) e o primeiro usuário administrador."""
    repo = AuthRepository(db)
    if repo.get_user_by_username(payload.username):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Usuário já cadastrado")

    empresa = EmpresaService(db).criar(
        payload.nome_empresa,
        telefone=normalizar_telefone(payload.telefone),
        email=payload.email,
    )
    user = repo.create_user(
        UserModel(
            empresa_id=empresa.id,
            username=payload.username,
            nome=payload.nome,
            hashed_password=hash_password(payload.password),
            type_user="admin",
        )
    )
    logger.info(f"[Auth] Registro - empresa_id={empresa.id} user_id={user.id}")
    return _token_para(user)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Retorna o usuário atual baseado no token JWT"
)
def obter_usuario_atual(
    current_user: UserModel = Depends(get_current_user),
):
    return current_user
