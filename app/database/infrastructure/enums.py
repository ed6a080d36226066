"""Criação dos tipos ENUM do PostgreSQL."""
import logging
from typing import List, Tuple

from sqlalchemy import Enum as SAEnum, text
from ..db_connection import engine, Base

logger = logging.getLogger(__name__)


def _enums_dos_models() -> List[Tuple[str, str, List[str]]]:
    """Coleta (schema, nome, valores) de todas as colunas Enum nomeadas dos models registrados."""
    encontrados = {}
    for table in Base.metadata.sorted_tables:
        for column in table.columns:
            tipo = column.type
            if isinstance(tipo, SAEnum) and tipo.name:
                schema = tipo.schema or table.schema or "public"
                encontrados[(schema, tipo.name)] = list(tipo.enums)
    return [(schema, name, values) for (schema, name), values in encontrados.items()]


def criar_enums():
    """Cria os tipos ENUM com schema correto antes de criar as tabelas."""
    with engine.begin() as conn:
        for schema, enum_name, values in _enums_dos_models():
            exists = conn.execute(
                text(
                    """
                    SELECT 1 FROM pg_type t
                    JOIN pg_namespace n ON n.oid = t.typnamespace
                    WHERE n.nspname = :schema AND t.typname = :name
                    """
                ),
                {"schema": schema, "name": enum_name},
            ).scalar()
            if exists:
                logger.debug(f"ENUM {schema}.{enum_name} já existe")
                continue
            values_str = ", ".join("'" + v.replace("'", "''") + "'" for v in values)
            conn.execute(text(f'CREATE TYPE "{schema}"."{enum_name}" AS ENUM ({values_str})'))
            logger.info(f"ENUM {schema}.{enum_name} criado com sucesso")
    logger.info("Todos os ENUMs verificados/criados.")
