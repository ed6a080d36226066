from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.core.admin_dependencies import get_current_user
from app.api.cadastros.models.user_model import UserModel
from app.api.producao.services.service_producao import ProducaoService
from app.api.producao.services.service_receita import ReceitaService


def get_receita_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> ReceitaService:
    return ReceitaService(db, current_user.empresa_id)


def get_producao_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> ProducaoService:
    return ProducaoService(db, current_user.empresa_id)
