"""
Classe base para inicializadores de domínio.
"""
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class DomainInitializer(ABC):
    """
    Cada domínio (cadastros, pedidos, estoque...) cria uma subclasse,
    registra uma instância no registry e o orquestrador chama `initialize()`.
    """

    @abstractmethod
    def get_domain_name(self) -> str:
        """Nome do domínio (para logging e identificação)."""

    @abstractmethod
    def get_schema_name(self) -> str:
        """Nome do schema do banco de dados que guarda as tabelas do domínio."""

    def initialize_tables(self) -> None:
        """
        Cria as tabelas do schema do domínio em ordem topológica
        (respeitando as FKs). Tabelas existentes são mantidas.
        """
        from app.database.db_connection import engine, Base

        schema_name = self.get_schema_name()
        tables_to_create = [
            t for t in Base.metadata.sorted_tables
            if t.schema == schema_name
        ]

        if not tables_to_create:
            logger.warning(f"Nenhuma tabela encontrada para o schema '{schema_name}'. Verifique se os models foram importados.")
            return

        logger.info(f"Criando {len(tables_to_create)} tabela(s) do domínio {self.get_domain_name()}...")
        for table in tables_to_create:
            table.create(engine, checkfirst=True)
            logger.debug(f"  Tabela {table.schema}.{table.name} criada/verificada")

    def initialize_data(self) -> None:
        """Dados iniciais do domínio (opcional)."""

    def initialize(self) -> None:
        logger.info(f"Inicializando domínio {self.get_domain_name()}...")
        try:
            self.initialize_tables()
            self.initialize_data()
            logger.info(f"Domínio {self.get_domain_name()} inicializado com sucesso.")
        except Exception as e:
            logger.error(f"Erro ao inicializar domínio {self.get_domain_name()}: {e}", exc_info=True)
            raise
