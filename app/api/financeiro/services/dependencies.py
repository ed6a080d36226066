from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.core.admin_dependencies import get_current_user
from app.api.cadastros.models.user_model import UserModel
from app.api.financeiro.services.service_conta import ContaService
from app.api.financeiro.services.service_relatorio_financeiro import RelatorioFinanceiroService
from app.api.financeiro.services.service_transacao import CategoriaFinanceiraService, TransacaoService


def get_categoria_financeira_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> CategoriaFinanceiraService:
    return CategoriaFinanceiraService(db, current_user.empresa_id)


def get_transacao_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> TransacaoService:
    return TransacaoService(db, current_user.empresa_id)


def get_contas_pagar_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> ContaService:
    return ContaService(db, current_user.empresa_id, "pagar")


def get_contas_receber_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> ContaService:
    return ContaService(db, current_user.empresa_id, "receber")


def get_relatorio_financeiro_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> RelatorioFinanceiroService:
    return RelatorioFinanceiroService(db, current_user.empresa_id)
