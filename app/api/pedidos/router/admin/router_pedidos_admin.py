"""
Router de pedidos (encomendas) para admin.
Lista, kanban, calendário e semana usam o mesmo filtro (status + busca).
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.pedidos.schemas import (
    AderecoPedidoIn,
    AlterarStatusPedidoBody,
    CalendarioOut,
    KanbanOut,
    PagamentoPedidoIn,
    PedidoCreate,
    PedidoOut,
    PedidoUpdate,
    PedidosDashboardOut,
    WhatsappLinkOut,
)
from app.api.pedidos.services.dependencies import get_pedido_service
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.shared.schemas.schema_shared_enums import PedidoStatusEnum
from app.core.admin_dependencies import get_current_user
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/pedidos/admin",
    tags=["Admin - Pedidos"],
    dependencies=[Depends(get_current_user)],
)


# ======================================================================
# ========================= VISUALIZAÇÕES ==============================
# ======================================================================
@router.get("/dashboard", response_model=PedidosDashboardOut)
def dashboard_pedidos(svc: PedidoService = Depends(get_pedido_service)):
    return svc.dashboard()


@router.get("/kanban", response_model=KanbanOut)
def listar_pedidos_kanban(
    busca: Optional[str] = Query(None, description="Nome do cliente ou número do pedido"),
    data_inicio: Optional[date] = Query(None),
    data_fim: Optional[date] = Query(None),
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(f"[Pedidos] Listar Kanban - busca={busca}")
    return svc.kanban(busca=busca, data_inicio=data_inicio, data_fim=data_fim)


@router.get("/calendario", response_model=CalendarioOut)
def calendario_pedidos(
    inicio: date = Query(...),
    fim: date = Query(...),
    status_filtro: Optional[PedidoStatusEnum] = Query(None, alias="status"),
    busca: Optional[str] = Query(None),
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.calendario(inicio, fim, status_filtro.value if status_filtro else None, busca)


@router.get("/semana", response_model=CalendarioOut)
def semana_pedidos(
    data: Optional[date] = Query(None, description="Qualquer dia da semana desejada (padrão: hoje)"),
    status_filtro: Optional[PedidoStatusEnum] = Query(None, alias="status"),
    busca: Optional[str] = Query(None),
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.semana(data, status_filtro.value if status_filtro else None, busca)


# ======================================================================
# ============================ PEDIDOS =================================
# ======================================================================
@router.get("", response_model=List[PedidoOut])
def listar_pedidos(
    status_filtro: Optional[PedidoStatusEnum] = Query(None, alias="status"),
    busca: Optional[str] = Query(None, description="Nome do cliente ou número do pedido"),
    data_inicio: Optional[date] = Query(None),
    data_fim: Optional[date] = Query(None),
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.list(status_filtro.value if status_filtro else None, busca, data_inicio, data_fim)


@router.get("/{pedido_id}", response_model=PedidoOut)
def get_pedido(pedido_id: int, svc: PedidoService = Depends(get_pedido_service)):
    return svc.get(pedido_id)


@router.post("", response_model=PedidoOut, status_code=status.HTTP_201_CREATED)
def criar_pedido(payload: PedidoCreate, svc: PedidoService = Depends(get_pedido_service)):
    logger.info(f"[Pedidos] Criar - cliente={payload.cliente_nome or payload.cliente_id}")
    return svc.create(payload)


@router.put("/{pedido_id}", response_model=PedidoOut)
def atualizar_pedido(pedido_id: int, payload: PedidoUpdate, svc: PedidoService = Depends(get_pedido_service)):
    logger.info(f"[Pedidos] Update - id={pedido_id}")
    return svc.update(pedido_id, payload)


@router.delete("/{pedido_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_pedido(pedido_id: int, svc: PedidoService = Depends(get_pedido_service)):
    logger.info(f"[Pedidos] Delete - id={pedido_id}")
    svc.delete(pedido_id)


@router.patch("/{pedido_id}/status", response_model=PedidoOut)
def alterar_status_pedido(
    pedido_id: int,
    payload: AlterarStatusPedidoBody,
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.alterar_status(pedido_id, payload.status)


@router.post("/{pedido_id}/pagamentos", response_model=PedidoOut)
def registrar_pagamento_pedido(
    pedido_id: int,
    payload: PagamentoPedidoIn,
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(f"[Pedidos] Pagamento - id={pedido_id} valor={payload.valor}")
    return svc.registrar_pagamento(pedido_id, payload)


@router.post("/{pedido_id}/aderecos", response_model=PedidoOut)
def adicionar_adereco_pedido(
    pedido_id: int,
    payload: AderecoPedidoIn,
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.adicionar_adereco(pedido_id, payload)


@router.delete("/{pedido_id}/aderecos/{adereco_pedido_id}", response_model=PedidoOut)
def remover_adereco_pedido(
    pedido_id: int,
    adereco_pedido_id: int,
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.remover_adereco(pedido_id, adereco_pedido_id)


@router.get("/{pedido_id}/whatsapp-link", response_model=WhatsappLinkOut)
def whatsapp_link_pedido(
    pedido_id: int,
    mensagem: Optional[str] = Query(None),
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.whatsapp_link(pedido_id, mensagem)
