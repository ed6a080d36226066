from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_produto import CategoriaProduto
from app.api.cadastros.schemas.schema_produto import PrecoTamanhoOut, ProdutoCreate, ProdutoOut, ProdutoUpdate
from app.api.cadastros.services.service_produto import ProdutoService
from app.core.admin_dependencies import get_empresa_id
from app.database.db_connection import get_db
from app.utils.decimal_utils import to_float
from app.utils.logger import logger

router = APIRouter(prefix="/api/cadastros/admin/produtos", tags=["Admin - Cadastros - Produtos"])


@router.get("", response_model=List[ProdutoOut])
def listar_produtos(
    categoria: Optional[CategoriaProduto] = Query(None),
    ativo: Optional[bool] = Query(None),
    search: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return ProdutoService(db, empresa_id).list(
        categoria=categoria.value if categoria else None, ativo=ativo, search=search, skip=skip, limit=limit
    )


@router.get("/{produto_id}", response_model=ProdutoOut)
def get_produto(produto_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return ProdutoService(db, empresa_id).get(produto_id)


@router.get("/{produto_id}/preco", response_model=PrecoTamanhoOut)
def preco_produto(
    produto_id: int,
    tamanho: Optional[str] = Query(None),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    preco = ProdutoService(db, empresa_id).preco(produto_id, tamanho)
    return PrecoTamanhoOut(produto_id=produto_id, tamanho=tamanho, preco=to_float(preco))


@router.post("", response_model=ProdutoOut, status_code=status.HTTP_201_CREATED)
def criar_produto(payload: ProdutoCreate, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    logger.info(f"[Produtos] Criar - {payload.nome}")
    return ProdutoService(db, empresa_id).create(payload)


@router.put("/{produto_id}", response_model=ProdutoOut)
def atualizar_produto(
    produto_id: int,
    payload: ProdutoUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Produtos] Update - id={produto_id}")
    return ProdutoService(db, empresa_id).update(produto_id, payload)


@router.delete("/{produto_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_produto(produto_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    logger.info(f"[Produtos] Delete - id={produto_id}")
    ProdutoService(db, empresa_id).delete(produto_id)
