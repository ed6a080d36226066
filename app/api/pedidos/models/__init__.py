"""
Models do bounded context de Pedidos.
"""
from .model_item_base import ItemLinhaMixin, TipoItemSAEnum
from .model_pedido import (
    PedidoModel,
    PedidoItemModel,
    PedidoHistoricoModel,
    PedidoStatusSAEnum,
    TipoEntregaSAEnum,
    PrioridadeSAEnum,
    StatusPagamentoSAEnum,
)

__all__ = [
    "ItemLinhaMixin",
    "TipoItemSAEnum",
    "PedidoModel",
    "PedidoItemModel",
    "PedidoHistoricoModel",
    "PedidoStatusSAEnum",
    "TipoEntregaSAEnum",
    "PrioridadeSAEnum",
    "StatusPagamentoSAEnum",
]
