from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_sabor import SaborModel
from app.api.cadastros.repositories.repo_sabor import SaborRepository
from app.api.cadastros.schemas.schema_sabor import SaborCreate, SaborUpdate


class SaborService:
    def __init__(self, db: Session, empresa_id: int):
        self.repo = SaborRepository(db, empresa_id)

    def get(self, sabor_id: int) -> SaborModel:
        sabor = self.repo.get(sabor_id)
        if not sabor:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Sabor não encontrado")
        return sabor

    def list(self, tipo: str | None = None, search: str | None = None, skip: int = 0, limit: int = 100):
        return self.repo.list(tipo, search=search, skip=skip, limit=limit)

    def create(self, payload: SaborCreate) -> SaborModel:
        return self.repo.create(SaborModel(**payload.model_dump(mode="json")))

    def update(self, sabor_id: int, payload: SaborUpdate) -> SaborModel:
        return self.repo.update(self.get(sabor_id), payload.model_dump(mode="json", exclude_unset=True))

    def delete(self, sabor_id: int) -> None:
        self.repo.delete(self.get(sabor_id))
