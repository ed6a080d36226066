from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.financeiro.schemas.schema_conta import (
    ContaCreate,
    ContaOut,
    ContaUpdate,
    PagamentoContaIn,
    ResumoContasOut,
    StatusConta,
)
from app.api.financeiro.services.dependencies import get_contas_pagar_service, get_contas_receber_service
from app.api.financeiro.services.service_conta import ContaService
from app.core.admin_dependencies import get_current_user


def _montar_router(prefix: str, tag: str, get_service: Callable[..., ContaService]) -> APIRouter:
    """As rotas de contas a pagar e a receber são idênticas; muda só o tipo."""
    router = APIRouter(prefix=prefix, tags=[tag], dependencies=[Depends(get_current_user)])

    @router.get("", response_model=List[ContaOut])
    def listar_contas(
        status_filtro: Optional[StatusConta] = Query(None, alias="status"),
        busca: Optional[str] = Query(None),
        svc: ContaService = Depends(get_service),
    ):
        return svc.list(status_filtro.value if status_filtro else None, busca)

    @router.get("/resumo", response_model=ResumoContasOut)
    def resumo_contas(svc: ContaService = Depends(get_service)):
        return svc.resumo()

    @router.get("/{conta_id}", response_model=ContaOut)
    def obter_conta(conta_id: int, svc: ContaService = Depends(get_service)):
        return svc.get(conta_id)

    @router.post("", response_model=ContaOut, status_code=status.HTTP_201_CREATED)
    def criar_conta(payload: ContaCreate, svc: ContaService = Depends(get_service)):
        return svc.create(payload)

    @router.put("/{conta_id}", response_model=ContaOut)
    def atualizar_conta(conta_id: int, payload: ContaUpdate, svc: ContaService = Depends(get_service)):
        return svc.update(conta_id, payload)

    @router.delete("/{conta_id}", status_code=status.HTTP_204_NO_CONTENT)
    def deletar_conta(conta_id: int, svc: ContaService = Depends(get_service)):
        svc.delete(conta_id)

    @router.post("/{conta_id}/pagamentos", response_model=ContaOut)
    def registrar_pagamento(conta_id: int, payload: PagamentoContaIn, svc: ContaService = Depends(get_service)):
        return svc.registrar_pagamento(conta_id, payload)

    return router


router_contas_pagar = _montar_router(
    "/api/financeiro/admin/contas-pagar", "Admin - Financeiro - Contas a Pagar", get_contas_pagar_service
)
router_contas_receber = _montar_router(
    "/api/financeiro/admin/contas-receber", "Admin - Financeiro - Contas a Receber", get_contas_receber_service
)
