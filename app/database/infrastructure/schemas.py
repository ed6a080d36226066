"""Criação dos schemas do PostgreSQL."""
import logging
from sqlalchemy import text, quoted_name
from ..db_connection import engine, DOMAIN_SCHEMAS

logger = logging.getLogger(__name__)


def criar_schemas():
    """Cria (se necessário) um schema por domínio."""
    with engine.begin() as conn:
        for schema in DOMAIN_SCHEMAS:
            logger.info(f"Criando/verificando schema: {schema}")
            conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS {quoted_name(schema, quote=True)}'))
    logger.info("Todos os schemas verificados/criados.")
