"""Timezone padrão do banco (datas de entrega e vencimentos são locais)."""
import logging

from sqlalchemy import text

from app.config.settings import DB_TIMEZONE
from ..db_connection import engine

logger = logging.getLogger(__name__)


def configurar_timezone():
    """Define o timezone do banco atual para DB_TIMEZONE (vale para as próximas conexões)."""
    try:
        with engine.begin() as conn:
            banco = conn.execute(text("SELECT current_database()")).scalar()
            conn.execute(text(f"ALTER DATABASE \"{banco}\" SET timezone TO '{DB_TIMEZONE}'"))
            conn.execute(text(f"SET timezone = '{DB_TIMEZONE}'"))
        logger.info(f"Timezone do banco {banco}: {DB_TIMEZONE}")
    except Exception as e:
        # usuário sem permissão de ALTER DATABASE: segue com o timezone do servidor
        logger.warning(f"Não foi possível configurar o timezone do banco: {e}")
