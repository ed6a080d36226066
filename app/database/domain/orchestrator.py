"""
Orquestrador central de inicialização do banco de dados.
Coordena a infraestrutura compartilhada e os domínios registrados.
"""
import logging

from ..infrastructure import configurar_timezone, criar_schemas, criar_enums
from .registry import get_registry
from ..db_connection import IS_SQLITE

logger = logging.getLogger(__name__)


class DatabaseOrchestrator:
    """
    Fluxo:
    1. Infraestrutura compartilhada (timezone, schemas, ENUMs) - somente Postgres
    2. Domínios registrados, na ordem de registro
    """

    def __init__(self):
        self.registry = get_registry()

    def inicializar_infraestrutura(self) -> None:
        if IS_SQLITE:
            logger.info("Banco sqlite: infraestrutura do Postgres ignorada.")
            return

        logger.info("Inicializando infraestrutura compartilhada...")
        configurar_timezone()
        criar_schemas()
        criar_enums()
        logger.info("Infraestrutura inicializada com sucesso.")

    def inicializar_dominios(self) -> None:
        initializers = self.registry.get_all()
        if not initializers:
            logger.warning("Nenhum domínio registrado para inicialização.")
            return

        logger.info(f"Inicializando {len(initializers)} domínio(s)...")
        for initializer in initializers:
            initializer.initialize()

    def initialize(self) -> None:
        logger.info("Iniciando processo de inicialização do banco de dados...")
        try:
            self.inicializar_infraestrutura()
            self.inicializar_dominios()
            logger.info("Banco inicializado com sucesso.")
        except Exception as e:
            logger.error(f"Erro durante inicialização do banco: {e}", exc_info=True)
            raise
