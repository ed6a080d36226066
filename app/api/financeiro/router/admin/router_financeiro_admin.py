from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.financeiro.schemas.schema_financeiro import (
    CategoriaFinanceiraIn,
    CategoriaFinanceiraOut,
    CategoriaFinanceiraUpdate,
    DREComparativoOut,
    FinanceiroDashboardOut,
    FluxoCaixaCelulaIn,
    FluxoCaixaOut,
    PrevisaoOut,
    TipoCategoriaFinanceira,
    TipoTransacao,
    TransacaoCreate,
    TransacaoOut,
    TransacaoUpdate,
)
from app.api.financeiro.services.dependencies import (
    get_categoria_financeira_service,
    get_relatorio_financeiro_service,
    get_transacao_service,
)
from app.api.financeiro.services.service_relatorio_financeiro import RelatorioFinanceiroService
from app.api.financeiro.services.service_transacao import CategoriaFinanceiraService, TransacaoService
from app.core.admin_dependencies import get_current_user

router = APIRouter(
    prefix="/api/financeiro/admin",
    tags=["Admin - Financeiro"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/dashboard", response_model=FinanceiroDashboardOut)
def dashboard_financeiro(svc: RelatorioFinanceiroService = Depends(get_relatorio_financeiro_service)):
    return svc.dashboard()


# ---------------- Categorias ----------------
@router.get("/categorias", response_model=List[CategoriaFinanceiraOut])
def listar_categorias(
    tipo: Optional[TipoCategoriaFinanceira] = Query(None),
    svc: CategoriaFinanceiraService = Depends(get_categoria_financeira_service),
):
    return svc.list(tipo.value if tipo else None)


@router.post("/categorias", response_model=CategoriaFinanceiraOut, status_code=status.HTTP_201_CREATED)
def criar_categoria(
    payload: CategoriaFinanceiraIn,
    svc: CategoriaFinanceiraService = Depends(get_categoria_financeira_service),
):
    return svc.create(payload)


@router.put("/categorias/{categoria_id}", response_model=CategoriaFinanceiraOut)
def atualizar_categoria(
    categoria_id: int,
    payload: CategoriaFinanceiraUpdate,
    svc: CategoriaFinanceiraService = Depends(get_categoria_financeira_service),
):
    return svc.update(categoria_id, payload)


@router.delete("/categorias/{categoria_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_categoria(categoria_id: int, svc: CategoriaFinanceiraService = Depends(get_categoria_financeira_service)):
    svc.delete(categoria_id)


# ---------------- Transações ----------------
@router.get("/transacoes", response_model=List[TransacaoOut])
def listar_transacoes(
    tipo: Optional[TipoTransacao] = Query(None),
    data_inicio: Optional[date] = Query(None),
    data_fim: Optional[date] = Query(None),
    categoria_id: Optional[int] = Query(None),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=500),
    svc: TransacaoService = Depends(get_transacao_service),
):
    return svc.list(tipo.value if tipo else None, data_inicio, data_fim, categoria_id, skip, limit)


@router.get("/transacoes/{transacao_id}", response_model=TransacaoOut)
def obter_transacao(transacao_id: int, svc: TransacaoService = Depends(get_transacao_service)):
    return svc.get(transacao_id)


@router.post("/transacoes", response_model=TransacaoOut, status_code=status.HTTP_201_CREATED)
def criar_transacao(payload: TransacaoCreate, svc: TransacaoService = Depends(get_transacao_service)):
    return svc.create(payload)


@router.put("/transacoes/{transacao_id}", response_model=TransacaoOut)
def atualizar_transacao(
    transacao_id: int,
    payload: TransacaoUpdate,
    svc: TransacaoService = Depends(get_transacao_service),
):
    return svc.update(transacao_id, payload)


@router.delete("/transacoes/{transacao_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_transacao(transacao_id: int, svc: TransacaoService = Depends(get_transacao_service)):
    svc.delete(transacao_id)


# ---------------- Relatórios ----------------
@router.get("/fluxo-caixa", response_model=FluxoCaixaOut)
def fluxo_caixa(
    ano: Optional[int] = Query(None, ge=2000, le=2100),
    svc: RelatorioFinanceiroService = Depends(get_relatorio_financeiro_service),
):
    return svc.fluxo_caixa(ano)


@router.put("/fluxo-caixa/{categoria_id}/{mes}")
def alterar_celula_fluxo_caixa(
    categoria_id: int,
    mes: str,
    payload: FluxoCaixaCelulaIn,
    svc: RelatorioFinanceiroService = Depends(get_relatorio_financeiro_service),
):
    svc.alterar_celula_fluxo(categoria_id, mes, payload)


@router.get("/dre", response_model=DREComparativoOut)
def dre(
    ano: Optional[int] = Query(None, ge=2000, le=2100),
    mes: Optional[int] = Query(None, ge=1, le=12),
    comparar: bool = Query(False, description="Inclui o mês anterior e a variação percentual"),
    svc: RelatorioFinanceiroService = Depends(get_relatorio_financeiro_service),
):
    return svc.dre(ano, mes, comparar)


@router.get("/previsao", response_model=PrevisaoOut)
def previsao(svc: RelatorioFinanceiroService = Depends(get_relatorio_financeiro_service)):
    return svc.previsao()
