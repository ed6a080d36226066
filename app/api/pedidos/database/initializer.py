"""
Inicializador do domínio Pedidos.
O schema `pedidos` guarda pedidos e orçamentos (com seus itens e históricos).
"""
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

# Importar models do domínio
from app.api.pedidos.models import PedidoModel, PedidoItemModel, PedidoHistoricoModel  # noqa: F401
from app.api.orcamentos.models import OrcamentoModel, OrcamentoItemModel, OrcamentoHistoricoModel  # noqa: F401


class PedidosInitializer(DomainInitializer):
    def get_domain_name(self) -> str:
        return "pedidos"

    def get_schema_name(self) -> str:
        return "pedidos"


_pedidos_initializer = PedidosInitializer()
register_domain(_pedidos_initializer)
