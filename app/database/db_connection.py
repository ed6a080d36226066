# app/database/db_connection.py

import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool

from ..config.settings import DB_CONFIG, DB_SSL_MODE, DATABASE_URL, DB_TIMEZONE
from app.core.rls_context import contexto_atual

# Base única para todos os models
Base = declarative_base()

logger = logging.getLogger(__name__)

# Schemas de domínio. No sqlite (testes) são traduzidos para o schema padrão.
DOMAIN_SCHEMAS = ["cadastros", "pedidos", "producao", "estoque", "financeiro", "integracoes"]


def _build_connection_string() -> str:
    if DATABASE_URL:
        return DATABASE_URL

    missing = [k for k in ('database', 'user', 'password', 'host', 'port') if not DB_CONFIG.get(k)]
    if missing:
        raise RuntimeError(f"Configuração do banco inválida, faltando variáveis: {', '.join(missing)}")

    ssl_query = f"?sslmode={DB_SSL_MODE}" if DB_SSL_MODE else ""
    return (
        f"postgresql://{DB_CONFIG['user']}:{DB_CONFIG['password']}"
        f"@{DB_CONFIG['host']}:{DB_CONFIG['port']}/{DB_CONFIG['database']}{ssl_query}"
    )


connection_string = _build_connection_string()
IS_SQLITE = connection_string.startswith("sqlite")

if IS_SQLITE:
    _in_memory = connection_string in ("sqlite://", "sqlite:///:memory:")
    engine = create_engine(
        connection_string,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool if _in_memory else None,
    ).execution_options(schema_translate_map={schema: None for schema in DOMAIN_SCHEMAS})
else:
    engine = create_engine(
        connection_string,
        pool_pre_ping=True,
        connect_args={
            "options": f"-c timezone={DB_TIMEZONE}"
        }
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def apply_rls_context(db: Session, user_id: Optional[int], empresa_id: Optional[int]) -> None:
    """
    Injeta usuário/empresa na sessão do Postgres para políticas como
    empresa_id = current_setting('app.empresa_id')::int
    """
    if IS_SQLITE:
        return
    try:
        db.execute(
            text("SELECT set_config('app.user_id', :v, true)"),
            {"v": str(user_id) if user_id is not None else ""},
        )
        db.execute(
            text("SELECT set_config('app.empresa_id', :v, true)"),
            {"v": str(empresa_id) if empresa_id is not None else ""},
        )
    except Exception as e:
        # Não deve bloquear a API caso o banco não aceite set_config
        logger.warning("Falha ao aplicar contexto RLS (set_config): %s", e)


# Dependency para FastAPI
def get_db():
    db = SessionLocal()
    try:
        apply_rls_context(db, *contexto_atual())
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
