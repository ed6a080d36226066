from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.cadastros.schemas.schema_colaborador import (
    ColaboradorCreate,
    ColaboradorOut,
    ColaboradorUpdate,
    EscalaSemanaOut,
    FuncaoColaborador,
    StatusColaborador,
)
from app.api.cadastros.services.service_colaborador import ColaboradorService
from app.core.admin_dependencies import get_empresa_id
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/cadastros/admin/colaboradores", tags=["Admin - Cadastros - Colaboradores"])


@router.get("", response_model=List[ColaboradorOut])
def listar_colaboradores(
    status_filtro: Optional[StatusColaborador] = Query(None, alias="status"),
    funcao: Optional[FuncaoColaborador] = Query(None),
    search: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return ColaboradorService(db, empresa_id).list(
        status_filtro=status_filtro.value if status_filtro else None,
        funcao=funcao.value if funcao else None,
        search=search,
        skip=skip,
        limit=limit,
    )


@router.get("/escala/semana", response_model=EscalaSemanaOut)
def escala_semana(empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return ColaboradorService(db, empresa_id).escala_semana()


@router.get("/{colaborador_id}", response_model=ColaboradorOut)
def get_colaborador(colaborador_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return ColaboradorService(db, empresa_id).get(colaborador_id)


@router.post("", response_model=ColaboradorOut, status_code=status.HTTP_201_CREATED)
def criar_colaborador(
    payload: ColaboradorCreate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Colaboradores] Criar - {payload.nome}")
    return ColaboradorService(db, empresa_id).create(payload)


@router.put("/{colaborador_id}", response_model=ColaboradorOut)
def atualizar_colaborador(
    colaborador_id: int,
    payload: ColaboradorUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Colaboradores] Update - id={colaborador_id}")
    return ColaboradorService(db, empresa_id).update(colaborador_id, payload)


@router.delete("/{colaborador_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_colaborador(colaborador_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    logger.info(f"[Colaboradores] Delete - id={colaborador_id}")
    ColaboradorService(db, empresa_id).delete(colaborador_id)
