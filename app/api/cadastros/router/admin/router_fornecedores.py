from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.cadastros.schemas.schema_fornecedor import (
    CategoriaFornecedor,
    FornecedorCreate,
    FornecedorOut,
    FornecedorUpdate,
)
from app.api.cadastros.services.service_fornecedor import FornecedorService
from app.core.admin_dependencies import get_empresa_id
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/cadastros/admin/fornecedores", tags=["Admin - Cadastros - Fornecedores"])


@router.get("", response_model=List[FornecedorOut])
def listar_fornecedores(
    categoria: Optional[CategoriaFornecedor] = Query(None),
    ativo: Optional[bool] = Query(None),
    search: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return FornecedorService(db, empresa_id).list(
        categoria=categoria.value if categoria else None, ativo=ativo, search=search, skip=skip, limit=limit
    )


@router.get("/{fornecedor_id}", response_model=FornecedorOut)
def get_fornecedor(fornecedor_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return FornecedorService(db, empresa_id).get(fornecedor_id)


@router.post("", response_model=FornecedorOut, status_code=status.HTTP_201_CREATED)
def criar_fornecedor(
    payload: FornecedorCreate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Fornecedores] Criar - {payload.nome_fantasia}")
    return FornecedorService(db, empresa_id).create(payload)


@router.put("/{fornecedor_id}", response_model=FornecedorOut)
def atualizar_fornecedor(
    fornecedor_id: int,
    payload: FornecedorUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Fornecedores] Update - id={fornecedor_id}")
    return FornecedorService(db, empresa_id).update(fornecedor_id, payload)


@router.delete("/{fornecedor_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_fornecedor(fornecedor_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    logger.info(f"[Fornecedores] Delete - id={fornecedor_id}")
    FornecedorService(db, empresa_id).delete(fornecedor_id)
