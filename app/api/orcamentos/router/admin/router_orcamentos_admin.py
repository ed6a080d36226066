from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.orcamentos.schemas import AprovacaoOut, OrcamentoCreate, OrcamentoOut, OrcamentoUpdate
from app.api.orcamentos.services.dependencies import get_orcamento_service
from app.api.orcamentos.services.service_orcamento import OrcamentoService
from app.api.shared.schemas.schema_shared_enums import OrcamentoStatusEnum
from app.core.admin_dependencies import get_current_user
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/orcamentos/admin",
    tags=["Admin - Orçamentos"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[OrcamentoOut])
def listar_orcamentos(
    status_filtro: Optional[OrcamentoStatusEnum] = Query(None, alias="status"),
    busca: Optional[str] = Query(None),
    svc: OrcamentoService = Depends(get_orcamento_service),
):
    return svc.list(status_filtro.value if status_filtro else None, busca)


@router.get("/{orcamento_id}", response_model=OrcamentoOut)
def get_orcamento(orcamento_id: int, svc: OrcamentoService = Depends(get_orcamento_service)):
    return svc.get(orcamento_id)


@router.post("", response_model=OrcamentoOut, status_code=status.HTTP_201_CREATED)
def criar_orcamento(payload: OrcamentoCreate, svc: OrcamentoService = Depends(get_orcamento_service)):
    logger.info(f"[Orcamentos] Criar - cliente={payload.cliente_nome or payload.cliente_id}")
    return svc.create(payload)


@router.put("/{orcamento_id}", response_model=OrcamentoOut)
def atualizar_orcamento(
    orcamento_id: int,
    payload: OrcamentoUpdate,
    svc: OrcamentoService = Depends(get_orcamento_service),
):
    return svc.update(orcamento_id, payload)


@router.delete("/{orcamento_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_orcamento(orcamento_id: int, svc: OrcamentoService = Depends(get_orcamento_service)):
    logger.info(f"[Orcamentos] Delete - id={orcamento_id}")
    svc.delete(orcamento_id)


@router.post("/{orcamento_id}/enviar", response_model=OrcamentoOut)
def enviar_orcamento(orcamento_id: int, svc: OrcamentoService = Depends(get_orcamento_service)):
    return svc.enviar(orcamento_id)


@router.post("/{orcamento_id}/recusar", response_model=OrcamentoOut)
def recusar_orcamento(orcamento_id: int, svc: OrcamentoService = Depends(get_orcamento_service)):
    return svc.recusar(orcamento_id)


@router.post("/{orcamento_id}/duplicar", response_model=OrcamentoOut, status_code=status.HTTP_201_CREATED)
def duplicar_orcamento(orcamento_id: int, svc: OrcamentoService = Depends(get_orcamento_service)):
    return svc.duplicar(orcamento_id)


@router.post("/{orcamento_id}/aprovar", response_model=AprovacaoOut)
def aprovar_orcamento(orcamento_id: int, svc: OrcamentoService = Depends(get_orcamento_service)):
    logger.info(f"[Orcamentos] Aprovar - id={orcamento_id}")
    orcamento, pedido = svc.aprovar(orcamento_id)
    return {"orcamento": orcamento, "pedido_id": pedido.id, "pedido_numero": pedido.numero}
