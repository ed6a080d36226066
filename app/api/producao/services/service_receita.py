from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.estoque.repositories.repo_estoque import IngredienteRepository
from app.api.producao.models.model_receita import ReceitaModel, ReceitaIngredienteModel
from app.api.producao.repositories.repo_receita import ReceitaRepository
from app.api.producao.schemas.schema_receita import ReceitaCreate, ReceitaIngredienteIn, ReceitaUpdate
from app.utils.logger import logger


class ReceitaService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id
        self.repo = ReceitaRepository(db, empresa_id)

    def get(self, receita_id: int) -> ReceitaModel:
        receita = self.repo.get(receita_id)
        if not receita:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Receita não encontrada")
        return receita

    def list(self, tipo: str | None = None, busca: str | None = None):
        return self.repo.list(tipo, busca)

    def _montar_ingredientes(self, itens: List[ReceitaIngredienteIn]) -> List[ReceitaIngredienteModel]:
        ingredientes_repo = IngredienteRepository(self.db, self.empresa_id)
        vistos = set()
        linhas = []
        for item in itens:
            if item.ingrediente_id in vistos:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "Ingrediente repetido na receita")
            if not ingredientes_repo.get(item.ingrediente_id):
                raise HTTPException(status.HTTP_404_NOT_FOUND, f"Ingrediente {item.ingrediente_id} não encontrado")
            vistos.add(item.ingrediente_id)
            linhas.append(ReceitaIngredienteModel(ingrediente_id=item.ingrediente_id, quantidade=item.quantidade))
        return linhas

    def create(self, payload: ReceitaCreate) -> ReceitaModel:
        data = payload.model_dump(mode="json", exclude={"ingredientes"})
        receita = ReceitaModel(**data)
        receita.ingredientes = self._montar_ingredientes(payload.ingredientes)
        self.repo.add(receita)
        self.db.commit()
        logger.info(f"[Producao] Receita criada id={receita.id} nome={receita.nome}")
        return self.get(receita.id)

    def update(self, receita_id: int, payload: ReceitaUpdate) -> ReceitaModel:
        receita = self.get(receita_id)
        data = payload.model_dump(mode="json", exclude_unset=True, exclude={"ingredientes"})
        for key, value in data.items():
            setattr(receita, key, value)
        if payload.ingredientes is not None:
            receita.ingredientes = self._montar_ingredientes(payload.ingredientes)
        self.db.commit()
        self.db.expire_all()
        return self.get(receita_id)

    def delete(self, receita_id: int) -> None:
        self.repo.delete(self.get(receita_id))
        self.db.commit()
