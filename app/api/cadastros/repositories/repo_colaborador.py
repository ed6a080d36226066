from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.cadastros.models.model_colaborador import ColaboradorModel


class ColaboradorRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(ColaboradorModel).filter(ColaboradorModel.empresa_id == self.empresa_id)

    def get(self, colaborador_id: int) -> Optional[ColaboradorModel]:
        return self._query().filter(ColaboradorModel.id == colaborador_id).first()

    def list(
        self,
        status: Optional[str] = None,
        funcao: Optional[str] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[ColaboradorModel]:
        q = self._query()
        if search and search.strip():
            q = q.filter(ColaboradorModel.nome.ilike(f"%{search.strip()}%"))
        if status:
            q = q.filter(ColaboradorModel.status == status)
        if funcao:
            q = q.filter(ColaboradorModel.funcao == funcao)
        q = q.order_by(ColaboradorModel.nome).offset(skip)
        return (q.limit(limit) if limit else q).all()

    def create(self, colaborador: ColaboradorModel) -> ColaboradorModel:
        colaborador.empresa_id = self.empresa_id
        self.db.add(colaborador)
        self.db.commit()
        self.db.refresh(colaborador)
        return colaborador

    def update(self, colaborador: ColaboradorModel, data: dict) -> ColaboradorModel:
        for key, value in data.items():
            setattr(colaborador, key, value)
        self.db.commit()
        self.db.refresh(colaborador)
        return colaborador

    def delete(self, colaborador: ColaboradorModel) -> None:
        self.db.delete(colaborador)
        self.db.commit()
