from decimal import Decimal

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.estoque.models.model_estoque import CATEGORIAS_PADRAO, CategoriaEstoqueModel, IngredienteModel
from app.api.estoque.repositories.repo_estoque import CategoriaEstoqueRepository, IngredienteRepository
from app.api.estoque.schemas.schema_estoque import CategoriaEstoqueIn, IngredienteCreate, IngredienteUpdate
from app.utils.decimal_utils import dec_qtd, to_float
from app.utils.logger import logger


class CategoriaEstoqueService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.repo = CategoriaEstoqueRepository(db, empresa_id)

    def garantir_padrao(self) -> None:
        """Cria as categorias padrão na primeira utilização da empresa."""
        if self.repo.list():
            return
        for nome in CATEGORIAS_PADRAO:
            self.repo.add(CategoriaEstoqueModel(nome=nome))
        self.db.commit()
        logger.info(f"[Estoque] Categorias padrão criadas - empresa_id={self.repo.empresa_id}")

    def list(self):
        self.garantir_padrao()
        return self.repo.list()

    def get(self, categoria_id: int) -> CategoriaEstoqueModel:
        categoria = self.repo.get(categoria_id)
        if not categoria:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Categoria não encontrada")
        return categoria

    def create(self, payload: CategoriaEstoqueIn) -> CategoriaEstoqueModel:
        if self.repo.get_by_nome(payload.nome.strip()):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Categoria já existe")
        categoria = self.repo.add(CategoriaEstoqueModel(nome=payload.nome.strip()))
        self.db.commit()
        return categoria

    def update(self, categoria_id: int, payload: CategoriaEstoqueIn) -> CategoriaEstoqueModel:
        categoria = self.get(categoria_id)
        novo_nome = payload.nome.strip()
        existente = self.repo.get_by_nome(novo_nome)
        if existente and existente.id != categoria.id:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Categoria já existe")
        antigo = categoria.nome
        categoria.nome = novo_nome
        # ingredientes guardam o nome da categoria
        IngredienteRepository(self.db, self.repo.empresa_id)._query().filter(
            IngredienteModel.categoria == antigo
        ).update({IngredienteModel.categoria: novo_nome}, synchronize_session=False)
        self.db.commit()
        return categoria

    def delete(self, categoria_id: int) -> None:
        self.repo.delete(self.get(categoria_id))
        self.db.commit()


class IngredienteService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.repo = IngredienteRepository(db, empresa_id)

    def get(self, ingrediente_id: int) -> IngredienteModel:
        ingrediente = self.repo.get(ingrediente_id)
        if not ingrediente:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Ingrediente não encontrado")
        return ingrediente

    def list(self, categoria=None, search=None, ativo=None):
        return self.repo.list(categoria=categoria, search=search, ativo=ativo)

    def alertas(self):
        return self.repo.list_baixo_estoque()

    def create(self, payload: IngredienteCreate) -> IngredienteModel:
        dados = payload.model_dump(mode="json")
        ingrediente = IngredienteModel(**dados)
        ingrediente.estoque_atual = dec_qtd(payload.estoque_atual)
        ingrediente.custo_medio = payload.custo_unitario if payload.custo_unitario else None
        self.repo.add(ingrediente)
        self.db.commit()
        self.db.refresh(ingrediente)
        return ingrediente

    def update(self, ingrediente_id: int, payload: IngredienteUpdate) -> IngredienteModel:
        ingrediente = self.get(ingrediente_id)
        for campo, valor in payload.model_dump(mode="json", exclude_unset=True).items():
            setattr(ingrediente, campo, valor)
        self.db.commit()
        self.db.refresh(ingrediente)
        return ingrediente

    def delete(self, ingrediente_id: int) -> None:
        self.repo.delete(self.get(ingrediente_id))
        self.db.commit()

    def dashboard(self) -> dict:
        ingredientes = self.repo.list(ativo=True)
        valor_total = sum(
            (Decimal(str(i.estoque_atual or 0)) * Decimal(str(i.custo_unitario or 0)) for i in ingredientes),
            Decimal("0"),
        )
        alertas = [i for i in ingredientes if i.estoque_baixo]
        return {
            "valor_total_estoque": to_float(valor_total),
            "itens_baixo_estoque": len(alertas),
            "total_itens": len(ingredientes),
            "alertas": alertas,
        }
