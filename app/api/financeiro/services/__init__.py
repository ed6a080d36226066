from .service_transacao import CategoriaFinanceiraService, TransacaoService
from .service_conta import ContaService
from .service_relatorio_financeiro import RelatorioFinanceiroService

__all__ = [
    "CategoriaFinanceiraService",
    "TransacaoService",
    "ContaService",
    "RelatorioFinanceiroService",
]
