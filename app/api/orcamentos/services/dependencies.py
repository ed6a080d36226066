from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.core.admin_dependencies import get_current_user
from app.api.cadastros.models.user_model import UserModel
from app.api.orcamentos.services.service_orcamento import OrcamentoService


def get_orcamento_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> OrcamentoService:
    return OrcamentoService(db, current_user.empresa_id, usuario=current_user.nome or current_user.username)
