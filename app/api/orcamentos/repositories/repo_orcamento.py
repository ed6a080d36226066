from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from app.api.orcamentos.models.model_orcamento import OrcamentoModel, OrcamentoHistoricoModel


class OrcamentoRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(OrcamentoModel).filter(OrcamentoModel.empresa_id == self.empresa_id)

    def get(self, orcamento_id: int) -> Optional[OrcamentoModel]:
        return (
            self._query()
            .options(selectinload(OrcamentoModel.itens), selectinload(OrcamentoModel.historico))
            .filter(OrcamentoModel.id == orcamento_id)
            .first()
        )

    def list(self, status: Optional[str] = None, busca: Optional[str] = None) -> List[OrcamentoModel]:
        q = self._query().options(selectinload(OrcamentoModel.itens))
        if status:
            q = q.filter(OrcamentoModel.status == status)
        if busca and busca.strip():
            termo = busca.strip()
            condicoes = [OrcamentoModel.cliente_nome.ilike(f"%{termo}%")]
            if termo.lstrip("#").isdigit():
                condicoes.append(OrcamentoModel.numero == int(termo.lstrip("#")))
            q = q.filter(or_(*condicoes))
        return q.order_by(OrcamentoModel.numero.desc()).all()

    def list_aprovados(self) -> List[OrcamentoModel]:
        return self._query().filter(OrcamentoModel.status == "Aprovado").all()

    def proximo_numero(self) -> int:
        atual = (
            self.db.query(func.max(OrcamentoModel.numero))
            .filter(OrcamentoModel.empresa_id == self.empresa_id)
            .scalar()
        )
        return (atual or 0) + 1

    def add(self, orcamento: OrcamentoModel) -> OrcamentoModel:
        orcamento.empresa_id = self.empresa_id
        self.db.add(orcamento)
        self.db.flush()
        return orcamento

    def add_historico(self, orcamento: OrcamentoModel, acao: str, usuario: Optional[str] = None) -> None:
        orcamento.historico.append(OrcamentoHistoricoModel(acao=acao, usuario=usuario))

    def delete(self, orcamento: OrcamentoModel) -> None:
        self.db.delete(orcamento)
        self.db.flush()
