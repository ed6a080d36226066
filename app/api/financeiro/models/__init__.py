from .model_financeiro import (
    CategoriaFinanceiraModel,
    TransacaoModel,
    CATEGORIAS_FINANCEIRAS_PADRAO,
)
from .model_conta import ContaModel, PagamentoContaModel, status_conta

__all__ = [
    "CategoriaFinanceiraModel",
    "TransacaoModel",
    "CATEGORIAS_FINANCEIRAS_PADRAO",
    "ContaModel",
    "PagamentoContaModel",
    "status_conta",
]
