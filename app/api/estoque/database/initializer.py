"""
Inicializador do domínio Estoque.
As categorias padrão são criadas por empresa no primeiro acesso (CategoriaEstoqueService).
"""
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

# Importar models do domínio
from app.api.estoque.models import (  # noqa: F401
    CategoriaEstoqueModel,
    IngredienteModel,
    MovimentacaoEstoqueModel,
    AderecoModel,
    CompraAderecoModel,
    AderecoPedidoModel,
)


class EstoqueInitializer(DomainInitializer):
    def get_domain_name(self) -> str:
        return "estoque"

    def get_schema_name(self) -> str:
        return "estoque"


_estoque_initializer = EstoqueInitializer()
register_domain(_estoque_initializer)
