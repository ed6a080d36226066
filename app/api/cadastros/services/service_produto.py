from decimal import Decimal
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_produto import ProdutoModel
from app.api.cadastros.repositories.repo_produto import ProdutoRepository
from app.api.cadastros.schemas.schema_produto import ProdutoCreate, ProdutoUpdate
from app.utils.decimal_utils import dec


def preco_para_tamanho(produto: ProdutoModel, tamanho: Optional[str]) -> Decimal:
    """Preço do tamanho quando existe em precos_por_tamanho; senão o preço base."""
    precos = produto.precos_por_tamanho or {}
    if tamanho and tamanho in precos and precos[tamanho] is not None:
        return dec(precos[tamanho])
    return dec(produto.preco)


class ProdutoService:
    def __init__(self, db: Session, empresa_id: int):
        self.repo = ProdutoRepository(db, empresa_id)

    def get(self, produto_id: int) -> ProdutoModel:
        produto = self.repo.get(produto_id)
        if not produto:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Produto não encontrado")
        return produto

    def list(
        self,
        categoria: Optional[str] = None,
        ativo: Optional[bool] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ):
        return self.repo.list(categoria=categoria, ativo=ativo, search=search, skip=skip, limit=limit)

    @staticmethod
    def _normalizar(data: dict) -> dict:
        if data.get("categoria") is not None:
            data["categoria"] = getattr(data["categoria"], "value", data["categoria"])
        if data.get("preco") is not None:
            data["preco"] = dec(data["preco"])
        return data

    def create(self, payload: ProdutoCreate) -> ProdutoModel:
        data = self._normalizar(payload.model_dump())
        return self.repo.create(ProdutoModel(**data))

    def update(self, produto_id: int, payload: ProdutoUpdate) -> ProdutoModel:
        produto = self.get(produto_id)
        data = self._normalizar(payload.model_dump(exclude_unset=True))
        return self.repo.update(produto, data)

    def delete(self, produto_id: int) -> None:
        self.repo.delete(self.get(produto_id))

    def preco(self, produto_id: int, tamanho: Optional[str]) -> Decimal:
        return preco_para_tamanho(self.get(produto_id), tamanho)
