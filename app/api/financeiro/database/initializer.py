"""
Inicializador do domínio Financeiro.
Categorias padrão são criadas por empresa no primeiro acesso (CategoriaFinanceiraService).
"""
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

from app.api.financeiro.models import (  # noqa: F401
    CategoriaFinanceiraModel,
    TransacaoModel,
    ContaModel,
    PagamentoContaModel,
)


class FinanceiroInitializer(DomainInitializer):
    def get_domain_name(self) -> str:
        return "financeiro"

    def get_schema_name(self) -> str:
        return "financeiro"


_financeiro_initializer = FinanceiroInitializer()
register_domain(_financeiro_initializer)
