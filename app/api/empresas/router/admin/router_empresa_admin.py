# app/api/empresas/router/admin/router_empresa_admin.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.core.admin_dependencies import get_empresa_id, require_admin
from app.api.empresas.schemas.schema_empresa import (
    ConfiguracoesOut,
    ConfiguracoesUpdate,
    EmpresaOut,
    EmpresaUpdate,
    TaxaEntregaOut,
)
from app.api.empresas.services.empresa_service import EmpresaService
from app.utils.decimal_utils import to_float
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/empresas/admin",
    tags=["Admin - Empresas"],
)


@router.get("/empresa", response_model=EmpresaOut)
def obter_empresa(
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return EmpresaService(db).get(empresa_id)


@router.put("/empresa", response_model=EmpresaOut, dependencies=[Depends(require_admin)])
def atualizar_empresa(
    payload: EmpresaUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Empresas] Update - empresa_id={empresa_id}")
    return EmpresaService(db).update(empresa_id, payload)


@router.get("/configuracoes", response_model=ConfiguracoesOut)
def obter_configuracoes(
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return EmpresaService(db).get_configuracoes(empresa_id)


@router.put("/configuracoes", response_model=ConfiguracoesOut, dependencies=[Depends(require_admin)])
def atualizar_configuracoes(
    payload: ConfiguracoesUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Empresas] Update configurações - empresa_id={empresa_id}")
    return EmpresaService(db).update_configuracoes(empresa_id, payload)


@router.get("/taxa-entrega", response_model=TaxaEntregaOut)
def calcular_taxa_entrega(
    distancia_km: float = Query(..., ge=0, description="Distância até o endereço de entrega"),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    taxa = EmpresaService(db).calcular_taxa_entrega(empresa_id, distancia_km)
    return TaxaEntregaOut(distancia_km=distancia_km, taxa=to_float(taxa))
