"""
Schemas (DTOs) do bounded context de Pedidos.
"""
from .schema_pedido import (
    PedidoCreate,
    PedidoUpdate,
    PagamentoPedidoIn,
    AderecoPedidoIn,
    AderecoPedidoOut,
    PedidoResumoOut,
    PedidoOut,
    KanbanColunaOut,
    KanbanOut,
    CalendarioDiaOut,
    CalendarioOut,
    PedidosDashboardOut,
    WhatsappLinkOut,
)
from .schema_pedido_status_historico import AlterarStatusPedidoBody, PedidoHistoricoOut

__all__ = [
    "PedidoCreate",
    "PedidoUpdate",
    "PagamentoPedidoIn",
    "AderecoPedidoIn",
    "AderecoPedidoOut",
    "PedidoResumoOut",
    "PedidoOut",
    "KanbanColunaOut",
    "KanbanOut",
    "CalendarioDiaOut",
    "CalendarioOut",
    "PedidosDashboardOut",
    "WhatsappLinkOut",
    "AlterarStatusPedidoBody",
    "PedidoHistoricoOut",
]
