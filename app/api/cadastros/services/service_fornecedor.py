from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_fornecedor import FornecedorModel
from app.api.cadastros.repositories.repo_fornecedor import FornecedorRepository
from app.api.cadastros.schemas.schema_fornecedor import FornecedorCreate, FornecedorUpdate


class FornecedorService:
    def __init__(self, db: Session, empresa_id: int):
        self.repo = FornecedorRepository(db, empresa_id)

    def get(self, fornecedor_id: int) -> FornecedorModel:
        fornecedor = self.repo.get(fornecedor_id)
        if not fornecedor:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Fornecedor não encontrado")
        return fornecedor

    def list(self, categoria=None, ativo=None, search=None, skip=0, limit=100):
        return self.repo.list(categoria=categoria, ativo=ativo, search=search, skip=skip, limit=limit)

    def create(self, payload: FornecedorCreate) -> FornecedorModel:
        return self.repo.create(FornecedorModel(**payload.model_dump(mode="json")))

    def update(self, fornecedor_id: int, payload: FornecedorUpdate) -> FornecedorModel:
        fornecedor = self.get(fornecedor_id)
        return self.repo.update(fornecedor, payload.model_dump(mode="json", exclude_unset=True))

    def delete(self, fornecedor_id: int) -> None:
        self.repo.delete(self.get(fornecedor_id))
