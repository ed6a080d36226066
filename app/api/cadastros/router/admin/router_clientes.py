from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.cadastros.schemas.schema_cliente import ClienteCreate, ClienteOut, ClienteUpdate
from app.api.cadastros.services.service_cliente import ClienteService
from app.core.admin_dependencies import get_empresa_id
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/cadastros/admin/clientes", tags=["Admin - Cadastros - Clientes"])


@router.get("", response_model=List[ClienteOut])
def listar_clientes(
    search: Optional[str] = Query(None, description="Busca por nome, e-mail ou telefone"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=500),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return ClienteService(db, empresa_id).list(search=search, skip=skip, limit=limit)


@router.get("/{cliente_id}", response_model=ClienteOut)
def get_cliente(
    cliente_id: int,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return ClienteService(db, empresa_id).get(cliente_id)


@router.post("", response_model=ClienteOut, status_code=status.HTTP_201_CREATED)
def criar_cliente(
    payload: ClienteCreate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Clientes] Criar - {payload.nome}")
    return ClienteService(db, empresa_id).create(payload)


@router.put("/{cliente_id}", response_model=ClienteOut)
def atualizar_cliente(
    cliente_id: int,
    payload: ClienteUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Clientes] Update - id={cliente_id}")
    return ClienteService(db, empresa_id).update(cliente_id, payload)


@router.delete("/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_cliente(
    cliente_id: int,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Clientes] Delete - id={cliente_id}")
    ClienteService(db, empresa_id).delete(cliente_id)
