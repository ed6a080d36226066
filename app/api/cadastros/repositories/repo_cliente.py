from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select, or_, func
from sqlalchemy.exc import IntegrityError

from app.api.cadastros.models.model_cliente import ClienteModel
from app.utils.telefone import variantes_telefone_para_busca


class ClienteRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(ClienteModel).filter(ClienteModel.empresa_id == self.empresa_id)

    def get_by_id(self, id: int) -> Optional[ClienteModel]:
        return self._query().filter(ClienteModel.id == id).first()

    def get_by_telefone(self, telefone: str) -> Optional[ClienteModel]:
        candidatos = variantes_telefone_para_busca(telefone)
        if not candidatos:
            return None
        # inclui com/sem 55 e com/sem 9 quando aplicável
        return self._query().filter(ClienteModel.telefone.in_(candidatos)).first()

    def get_by_email(self, email: str) -> Optional[ClienteModel]:
        if not email:
            return None
        return self._query().filter(func.lower(ClienteModel.email) == email.strip().lower()).first()

    def list(
        self,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> List[ClienteModel]:
        stmt = select(ClienteModel).where(ClienteModel.empresa_id == self.empresa_id)

        if search is not None and search.strip():
            like = f"%{search.strip()}%"
            conditions = [
                ClienteModel.nome.ilike(like),
                ClienteModel.email.ilike(like),
                ClienteModel.telefone.ilike(like),
            ]
            candidatos = variantes_telefone_para_busca(search)
            if candidatos:
                conditions.append(ClienteModel.telefone.in_(candidatos))
            stmt = stmt.where(or_(*conditions))

        stmt = stmt.order_by(ClienteModel.nome.asc(), ClienteModel.id.asc()).offset(int(skip)).limit(int(limit))
        return list(self.db.execute(stmt).scalars().all())

    def list_all(self) -> List[ClienteModel]:
        return self._query().all()

    def create(self, **data) -> ClienteModel:
        obj = ClienteModel(empresa_id=self.empresa_id, **data)
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj

    def update(self, db_obj: ClienteModel, **data) -> ClienteModel:
        for k, v in data.items():
            setattr(db_obj, k, v)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ClienteModel) -> None:
        self.db.delete(db_obj)
        self.db.commit()
