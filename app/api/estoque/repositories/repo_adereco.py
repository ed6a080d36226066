from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.estoque.models.model_adereco import AderecoModel, CompraAderecoModel


class AderecoRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(AderecoModel).filter(AderecoModel.empresa_id == self.empresa_id)

    def get(self, adereco_id: int) -> Optional[AderecoModel]:
        return self._query().filter(AderecoModel.id == adereco_id).first()

    def list(self, categoria: Optional[str] = None, search: Optional[str] = None) -> List[AderecoModel]:
        q = self._query()
        if categoria:
            q = q.filter(AderecoModel.categoria == categoria)
        if search and search.strip():
            q = q.filter(AderecoModel.nome.ilike(f"%{search.strip()}%"))
        return q.order_by(AderecoModel.nome).all()

    def list_baixo_estoque(self) -> List[AderecoModel]:
        return (
            self._query()
            .filter(AderecoModel.ativo.is_(True), AderecoModel.estoque <= AderecoModel.estoque_min)
            .order_by(AderecoModel.nome)
            .all()
        )

    def list_compras(self, adereco_id: Optional[int] = None) -> List[CompraAderecoModel]:
        q = self.db.query(CompraAderecoModel).filter(CompraAderecoModel.empresa_id == self.empresa_id)
        if adereco_id:
            q = q.filter(CompraAderecoModel.adereco_id == adereco_id)
        return q.order_by(CompraAderecoModel.data.desc(), CompraAderecoModel.id.desc()).all()

    def add(self, obj):
        obj.empresa_id = self.empresa_id
        self.db.add(obj)
        self.db.flush()
        return obj

    def delete(self, adereco: AderecoModel) -> None:
        self.db.delete(adereco)
        self.db.flush()
