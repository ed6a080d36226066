from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.api.shared.schemas.schema_shared_enums import PedidoStatusEnum


class AlterarStatusPedidoBody(BaseModel):
    status: PedidoStatusEnum


class PedidoHistoricoOut(BaseModel):
    id: int
    descricao: str
    status_anterior: Optional[str] = None
    status_novo: Optional[str] = None
    usuario: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
