from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.cadastros.schemas.schema_sabor import SaborCreate, SaborOut, SaborUpdate
from app.api.cadastros.services.service_sabor import SaborService
from app.api.shared.schemas.schema_shared_enums import TipoSaborEnum
from app.core.admin_dependencies import get_empresa_id
from app.database.db_connection import get_db

router = APIRouter(prefix="/api/cadastros/admin/sabores", tags=["Admin - Cadastros - Sabores"])


@router.get("", response_model=List[SaborOut])
def listar_sabores(
    tipo: Optional[TipoSaborEnum] = Query(None),
    search: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return SaborService(db, empresa_id).list(tipo.value if tipo else None, search=search, skip=skip, limit=limit)


@router.post("", response_model=SaborOut, status_code=status.HTTP_201_CREATED)
def criar_sabor(payload: SaborCreate, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return SaborService(db, empresa_id).create(payload)


@router.put("/{sabor_id}", response_model=SaborOut)
def atualizar_sabor(
    sabor_id: int,
    payload: SaborUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return SaborService(db, empresa_id).update(sabor_id, payload)


@router.delete("/{sabor_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_sabor(sabor_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    SaborService(db, empresa_id).delete(sabor_id)
