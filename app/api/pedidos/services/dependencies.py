from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.core.admin_dependencies import get_current_user
from app.api.cadastros.models.user_model import UserModel
from app.api.pedidos.services.service_pedido import PedidoService


def get_pedido_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> PedidoService:
    return PedidoService(
        db,
        empresa_id=current_user.empresa_id,
        usuario=current_user.nome or current_user.username,
    )
