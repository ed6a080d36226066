# app/api/empresas/repositories/empresa_repo.py
from typing import Optional
from sqlalchemy.orm import Session

from app.api.empresas.models.empresa_model import EmpresaModel


class EmpresaRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, empresa_id: int) -> Optional[EmpresaModel]:
        return self.db.query(EmpresaModel).filter(EmpresaModel.id == empresa_id).first()

    def slug_exists(self, slug: str) -> bool:
        return self.db.query(EmpresaModel.id).filter(EmpresaModel.slug == slug).first() is not None

    def create(self, empresa: EmpresaModel) -> EmpresaModel:
        self.db.add(empresa)
        self.db.commit()
        self.db.refresh(empresa)
        return empresa

    def update(self, empresa: EmpresaModel, data: dict) -> EmpresaModel:
        for key, value in data.items():
            setattr(empresa, key, value)
        self.db.commit()
        self.db.refresh(empresa)
        return empresa
