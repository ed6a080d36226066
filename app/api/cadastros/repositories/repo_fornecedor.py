from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_fornecedor import FornecedorModel


class FornecedorRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(FornecedorModel).filter(FornecedorModel.empresa_id == self.empresa_id)

    def get(self, fornecedor_id: int) -> Optional[FornecedorModel]:
        return self._query().filter(FornecedorModel.id == fornecedor_id).first()

    def list(
        self,
        categoria: Optional[str] = None,
        ativo: Optional[bool] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[FornecedorModel]:
        q = self._query()
        if categoria:
            q = q.filter(FornecedorModel.categoria == categoria)
        if ativo is not None:
            q = q.filter(FornecedorModel.ativo == ativo)
        if search and search.strip():
            like = f"%{search.strip()}%"
            q = q.filter(or_(
                FornecedorModel.nome_fantasia.ilike(like),
                FornecedorModel.razao_social.ilike(like),
                FornecedorModel.cnpj.ilike(like),
            ))
        return q.order_by(FornecedorModel.nome_fantasia).offset(skip).limit(limit).all()

    def create(self, fornecedor: FornecedorModel) -> FornecedorModel:
        fornecedor.empresa_id = self.empresa_id
        self.db.add(fornecedor)
        self.db.commit()
        self.db.refresh(fornecedor)
        return fornecedor

    def update(self, fornecedor: FornecedorModel, data: dict) -> FornecedorModel:
        for key, value in data.items():
            setattr(fornecedor, key, value)
        self.db.commit()
        self.db.refresh(fornecedor)
        return fornecedor

    def delete(self, fornecedor: FornecedorModel) -> None:
        self.db.delete(fornecedor)
        self.db.commit()
