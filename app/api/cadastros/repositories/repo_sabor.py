from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.cadastros.models.model_sabor import SaborModel


class SaborRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def get(self, sabor_id: int) -> Optional[SaborModel]:
        return (
            self.db.query(SaborModel)
            .filter(SaborModel.empresa_id == self.empresa_id, SaborModel.id == sabor_id)
            .first()
        )

    def list(
        self,
        tipo: Optional[str] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[SaborModel]:
        q = self.db.query(SaborModel).filter(SaborModel.empresa_id == self.empresa_id)
        if tipo:
            q = q.filter(SaborModel.tipo == tipo)
        if search and search.strip():
            q = q.filter(SaborModel.nome.ilike(f"%{search.strip()}%"))
        return q.order_by(SaborModel.tipo, SaborModel.nome).offset(skip).limit(limit).all()

    def create(self, sabor: SaborModel) -> SaborModel:
        sabor.empresa_id = self.empresa_id
        self.db.add(sabor)
        self.db.commit()
        self.db.refresh(sabor)
        return sabor

    def update(self, sabor: SaborModel, data: dict) -> SaborModel:
        for key, value in data.items():
            setattr(sabor, key, value)
        self.db.commit()
        self.db.refresh(sabor)
        return sabor

    def delete(self, sabor: SaborModel) -> None:
        self.db.delete(sabor)
        self.db.commit()
