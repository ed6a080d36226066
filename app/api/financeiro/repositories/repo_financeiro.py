from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.financeiro.models.model_financeiro import CategoriaFinanceiraModel, TransacaoModel
from app.api.financeiro.models.model_conta import ContaModel


class CategoriaFinanceiraRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(CategoriaFinanceiraModel).filter(CategoriaFinanceiraModel.empresa_id == self.empresa_id)

    def get(self, categoria_id: int) -> Optional[CategoriaFinanceiraModel]:
        return self._query().filter(CategoriaFinanceiraModel.id == categoria_id).first()

    def get_by_nome(self, nome: str) -> Optional[CategoriaFinanceiraModel]:
        return self._query().filter(CategoriaFinanceiraModel.nome.ilike(nome.strip())).first()

    def list(self, tipo: Optional[str] = None) -> List[CategoriaFinanceiraModel]:
        q = self._query()
        if tipo:
            q = q.filter(CategoriaFinanceiraModel.tipo == tipo)
        return q.order_by(CategoriaFinanceiraModel.tipo, CategoriaFinanceiraModel.nome).all()

    def add(self, categoria: CategoriaFinanceiraModel) -> CategoriaFinanceiraModel:
        categoria.empresa_id = self.empresa_id
        self.db.add(categoria)
        self.db.flush()
        return categoria

    def delete(self, categoria: CategoriaFinanceiraModel) -> None:
        self.db.delete(categoria)
        self.db.flush()


class TransacaoRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(TransacaoModel).filter(TransacaoModel.empresa_id == self.empresa_id)

    def get(self, transacao_id: int) -> Optional[TransacaoModel]:
        return self._query().filter(TransacaoModel.id == transacao_id).first()

    def list(
        self,
        tipo: Optional[str] = None,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
        categoria_id: Optional[int] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[TransacaoModel]:
        q = self._query()
        if tipo:
            q = q.filter(TransacaoModel.tipo == tipo)
        if data_inicio:
            q = q.filter(TransacaoModel.data >= data_inicio)
        if data_fim:
            q = q.filter(TransacaoModel.data <= data_fim)
        if categoria_id:
            q = q.filter(TransacaoModel.categoria_id == categoria_id)
        q = q.order_by(TransacaoModel.data.desc(), TransacaoModel.id.desc()).offset(skip)
        if limit:
            q = q.limit(limit)
        return q.all()

    def add(self, transacao: TransacaoModel) -> TransacaoModel:
        transacao.empresa_id = self.empresa_id
        self.db.add(transacao)
        self.db.flush()
        return transacao

    def delete(self, transacao: TransacaoModel) -> None:
        self.db.delete(transacao)
        self.db.flush()


class ContaRepository:
    def __init__(self, db: Session, empresa_id: int, tipo: str):
        self.db = db
        self.empresa_id = empresa_id
        self.tipo = tipo

    def _query(self):
        return self.db.query(ContaModel).filter(
            ContaModel.empresa_id == self.empresa_id,
            ContaModel.tipo == self.tipo,
        )

    def get(self, conta_id: int) -> Optional[ContaModel]:
        return self._query().filter(ContaModel.id == conta_id).first()

    def list(self, busca: Optional[str] = None) -> List[ContaModel]:
        q = self._query()
        if busca and busca.strip():
            termo = f"%{busca.strip()}%"
            q = q.filter(ContaModel.descricao.ilike(termo) | ContaModel.contraparte_nome.ilike(termo))
        return q.order_by(ContaModel.data_vencimento, ContaModel.id).all()

    def add(self, conta: ContaModel) -> ContaModel:
        conta.empresa_id = self.empresa_id
        conta.tipo = self.tipo
        self.db.add(conta)
        self.db.flush()
        return conta

    def delete(self, conta: ContaModel) -> None:
        self.db.delete(conta)
        self.db.flush()
