from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.cadastros.models.model_produto import ProdutoModel


class ProdutoRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def get(self, produto_id: int) -> Optional[ProdutoModel]:
        return (
            self.db.query(ProdutoModel)
            .filter(ProdutoModel.empresa_id == self.empresa_id, ProdutoModel.id == produto_id)
            .first()
        )

    def list(
        self,
        categoria: Optional[str] = None,
        ativo: Optional[bool] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[ProdutoModel]:
        q = self.db.query(ProdutoModel).filter(ProdutoModel.empresa_id == self.empresa_id)
        if categoria:
            q = q.filter(ProdutoModel.categoria == categoria)
        if ativo is not None:
            q = q.filter(ProdutoModel.ativo.is_(ativo))
        if search and search.strip():
            q = q.filter(ProdutoModel.nome.ilike(f"%{search.strip()}%"))
        return q.order_by(ProdutoModel.categoria, ProdutoModel.nome).offset(skip).limit(limit).all()

    def create(self, produto: ProdutoModel) -> ProdutoModel:
        produto.empresa_id = self.empresa_id
        self.db.add(produto)
        self.db.commit()
        self.db.refresh(produto)
        return produto

    def update(self, produto: ProdutoModel, data: dict) -> ProdutoModel:
        for key, value in data.items():
            setattr(produto, key, value)
        self.db.commit()
        self.db.refresh(produto)
        return produto

    def delete(self, produto: ProdutoModel) -> None:
        self.db.delete(produto)
        self.db.commit()
