from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.estoque.models.model_estoque import (
    CategoriaEstoqueModel,
    IngredienteModel,
    MovimentacaoEstoqueModel,
)


class CategoriaEstoqueRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(CategoriaEstoqueModel).filter(CategoriaEstoqueModel.empresa_id == self.empresa_id)

    def get(self, categoria_id: int) -> Optional[CategoriaEstoqueModel]:
        return self._query().filter(CategoriaEstoqueModel.id == categoria_id).first()

    def get_by_nome(self, nome: str) -> Optional[CategoriaEstoqueModel]:
        return self._query().filter(CategoriaEstoqueModel.nome == nome).first()

    def list(self) -> List[CategoriaEstoqueModel]:
        return self._query().order_by(CategoriaEstoqueModel.nome).all()

    def add(self, categoria: CategoriaEstoqueModel) -> CategoriaEstoqueModel:
        categoria.empresa_id = self.empresa_id
        self.db.add(categoria)
        self.db.flush()
        return categoria

    def delete(self, categoria: CategoriaEstoqueModel) -> None:
        self.db.delete(categoria)
        self.db.flush()


class IngredienteRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(IngredienteModel).filter(IngredienteModel.empresa_id == self.empresa_id)

    def get(self, ingrediente_id: int) -> Optional[IngredienteModel]:
        return self._query().filter(IngredienteModel.id == ingrediente_id).first()

    def list(
        self,
        categoria: Optional[str] = None,
        search: Optional[str] = None,
        ativo: Optional[bool] = None,
    ) -> List[IngredienteModel]:
        q = self._query()
        if categoria:
            q = q.filter(IngredienteModel.categoria == categoria)
        if ativo is not None:
            q = q.filter(IngredienteModel.ativo == ativo)
        if search and search.strip():
            q = q.filter(IngredienteModel.nome.ilike(f"%{search.strip()}%"))
        return q.order_by(IngredienteModel.categoria, IngredienteModel.nome).all()

    def list_baixo_estoque(self) -> List[IngredienteModel]:
        return (
            self._query()
            .filter(
                IngredienteModel.ativo.is_(True),
                IngredienteModel.estoque_atual <= IngredienteModel.estoque_minimo,
            )
            .order_by(IngredienteModel.nome)
            .all()
        )

    def add(self, ingrediente: IngredienteModel) -> IngredienteModel:
        ingrediente.empresa_id = self.empresa_id
        self.db.add(ingrediente)
        self.db.flush()
        return ingrediente

    def delete(self, ingrediente: IngredienteModel) -> None:
        self.db.delete(ingrediente)
        self.db.flush()


class MovimentacaoRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def list(
        self,
        ingrediente_id: Optional[int] = None,
        tipo: Optional[str] = None,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
        limit: int = 200,
    ) -> List[MovimentacaoEstoqueModel]:
        q = self.db.query(MovimentacaoEstoqueModel).filter(MovimentacaoEstoqueModel.empresa_id == self.empresa_id)
        if ingrediente_id:
            q = q.filter(MovimentacaoEstoqueModel.ingrediente_id == ingrediente_id)
        if tipo:
            q = q.filter(MovimentacaoEstoqueModel.tipo == tipo)
        if data_inicio:
            q = q.filter(MovimentacaoEstoqueModel.data >= data_inicio)
        if data_fim:
            # inclui o dia inteiro
            q = q.filter(MovimentacaoEstoqueModel.data < data_fim + timedelta(days=1))
        return q.order_by(MovimentacaoEstoqueModel.data.desc(), MovimentacaoEstoqueModel.id.desc()).limit(limit).all()

    def add(self, mov: MovimentacaoEstoqueModel) -> MovimentacaoEstoqueModel:
        mov.empresa_id = self.empresa_id
        self.db.add(mov)
        self.db.flush()
        return mov
