"""
Ponto de entrada da inicialização do banco.

Importar os inicializadores registra os domínios no registry; a ordem dos
imports é a ordem de criação das tabelas (FKs entre schemas):
cadastros -> pedidos -> estoque -> producao -> financeiro -> integracoes
"""
import logging

from app.api.cadastros.database.initializer import CadastrosInitializer  # noqa: F401
from app.api.pedidos.database.initializer import PedidosInitializer  # noqa: F401
from app.api.estoque.database.initializer import EstoqueInitializer  # noqa: F401
from app.api.producao.database.initializer import ProducaoInitializer  # noqa: F401
from app.api.financeiro.database.initializer import FinanceiroInitializer  # noqa: F401
from app.api.integracoes.database.initializer import IntegracoesInitializer  # noqa: F401

from .domain.orchestrator import DatabaseOrchestrator

logger = logging.getLogger(__name__)


def inicializar_banco() -> None:
    logger.info("Iniciando processo de inicialização do banco de dados...")
    DatabaseOrchestrator().initialize()


if __name__ == "__main__":
    inicializar_banco()
