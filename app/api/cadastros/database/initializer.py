"""
Inicializador do domínio Cadastros.
Cria as tabelas do schema `cadastros` (empresas, usuários e cadastros de apoio)
e garante uma empresa de demonstração com usuário admin.
"""
import logging

from sqlalchemy.exc import IntegrityError

from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain
from app.database.db_connection import SessionLocal
from app.core.security import hash_password

# Importar models do domínio
from app.api.empresas.models.empresa_model import EmpresaModel  # noqa: F401
from app.api.cadastros.models import (  # noqa: F401
    UserModel,
    ClienteModel,
    ProdutoModel,
    SaborModel,
    FornecedorModel,
    ColaboradorModel,
)

logger = logging.getLogger(__name__)

EMPRESA_DEMO = "Confeitaria Demo"
ADMIN_USERNAME = "admin"
ADMIN_SENHA_PADRAO = "admin123"


class CadastrosInitializer(DomainInitializer):
    """Inicializador do domínio Cadastros."""

    def get_domain_name(self) -> str:
        return "cadastros"

    def get_schema_name(self) -> str:
        return "cadastros"

    def initialize_data(self) -> None:
        self._criar_empresa_e_admin_padrao()

    def _criar_empresa_e_admin_padrao(self) -> None:
        """Cria a empresa demo e o usuário admin caso ainda não exista nenhum usuário."""
        from app.api.empresas.services.empresa_service import EmpresaService

        with SessionLocal() as session:
            if session.query(UserModel).first() is not None:
                logger.info("  Usuários já existem. Pulando criação do admin padrão.")
                return
            try:
                empresa = EmpresaService(session).criar(EMPRESA_DEMO)
                session.add(UserModel(
                    empresa_id=empresa.id,
                    username=ADMIN_USERNAME,
                    nome="Administrador",
                    hashed_password=hash_password(ADMIN_SENHA_PADRAO),
                    type_user="admin",
                ))
                session.commit()
                logger.info(f"  Usuário admin criado (senha padrão: {ADMIN_SENHA_PADRAO}).")
            except IntegrityError:
                # corrida entre múltiplos processos
                session.rollback()
                logger.info("  Usuário admin já existe (detectado por integridade).")


# Cria e registra a instância do inicializador
_cadastros_initializer = CadastrosInitializer()
register_domain(_cadastros_initializer)
