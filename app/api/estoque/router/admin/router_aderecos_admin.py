from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.estoque.schemas.schema_adereco import (
    AderecoCreate,
    AderecoOut,
    AderecoUpdate,
    CompraAderecoIn,
    CompraAderecoOut,
)
from app.api.estoque.services.service_adereco import AderecoService
from app.core.admin_dependencies import get_empresa_id
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/estoque/admin/aderecos", tags=["Admin - Estoque - Adereços"])


@router.get("", response_model=List[AderecoOut])
def listar_aderecos(
    categoria: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return AderecoService(db, empresa_id).list(categoria=categoria, search=search)


@router.get("/alertas", response_model=List[AderecoOut])
def alertas_aderecos(empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return AderecoService(db, empresa_id).alertas()


@router.get("/compras", response_model=List[CompraAderecoOut])
def listar_compras(
    adereco_id: Optional[int] = Query(None),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return AderecoService(db, empresa_id).list_compras(adereco_id)


@router.post("/compras", response_model=CompraAderecoOut, status_code=status.HTTP_201_CREATED)
def registrar_compra(
    payload: CompraAderecoIn,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Aderecos] Registrar compra - adereco_id={payload.adereco_id}")
    return AderecoService(db, empresa_id).registrar_compra(payload)


@router.get("/{adereco_id}", response_model=AderecoOut)
def get_adereco(adereco_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return AderecoService(db, empresa_id).get(adereco_id)


@router.post("", response_model=AderecoOut, status_code=status.HTTP_201_CREATED)
def criar_adereco(payload: AderecoCreate, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return AderecoService(db, empresa_id).create(payload)


@router.put("/{adereco_id}", response_model=AderecoOut)
def atualizar_adereco(
    adereco_id: int,
    payload: AderecoUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return AderecoService(db, empresa_id).update(adereco_id, payload)


@router.delete("/{adereco_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_adereco(adereco_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    AderecoService(db, empresa_id).delete(adereco_id)
