"""
Schemas compartilhados entre diferentes domínios
"""

from app.api.shared.schemas.schema_shared_enums import (
    TipoEntregaEnum,
    TipoItemEnum,
    PedidoStatusEnum,
    PrioridadeEnum,
    StatusPagamentoEnum,
    FormaPagamentoEnum,
    OrcamentoStatusEnum,
    TipoSaborEnum,
)
from app.api.shared.schemas.schema_item import ItemIn, ItemOut, EnderecoSchema

__all__ = [
    "TipoEntregaEnum",
    "TipoItemEnum",
    "PedidoStatusEnum",
    "PrioridadeEnum",
    "StatusPagamentoEnum",
    "FormaPagamentoEnum",
    "OrcamentoStatusEnum",
    "TipoSaborEnum",
    "ItemIn",
    "ItemOut",
    "EnderecoSchema",
]
