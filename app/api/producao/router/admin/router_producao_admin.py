from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.producao.schemas.schema_producao import (
    ConfigProducaoIn,
    ConfigProducaoOut,
    PlanoProducaoOut,
    ResumoProducaoOut,
)
from app.api.producao.schemas.schema_receita import ReceitaCreate, ReceitaOut, ReceitaUpdate, TipoReceita
from app.api.producao.services.dependencies import get_producao_service, get_receita_service
from app.api.producao.services.service_producao import ProducaoService
from app.api.producao.services.service_receita import ReceitaService
from app.core.admin_dependencies import get_current_user

router = APIRouter(
    prefix="/api/producao/admin",
    tags=["Admin - Produção"],
    dependencies=[Depends(get_current_user)],
)


# ---------------- Planejamento ----------------
@router.get("/resumo", response_model=ResumoProducaoOut)
def resumo_producao(
    inicio: Optional[date] = Query(None, description="Data inicial de entrega (padrão: segunda-feira da semana)"),
    fim: Optional[date] = Query(None, description="Data final de entrega (padrão: domingo da semana)"),
    svc: ProducaoService = Depends(get_producao_service),
):
    return svc.resumo(inicio, fim)


@router.get("/plano", response_model=PlanoProducaoOut)
def plano_producao(
    inicio: Optional[date] = Query(None),
    fim: Optional[date] = Query(None),
    svc: ProducaoService = Depends(get_producao_service),
):
    return svc.plano(inicio, fim)


@router.get("/configuracoes", response_model=ConfigProducaoOut)
def obter_config(svc: ProducaoService = Depends(get_producao_service)):
    return svc.get_config()


@router.put("/configuracoes", response_model=ConfigProducaoOut)
def atualizar_config(payload: ConfigProducaoIn, svc: ProducaoService = Depends(get_producao_service)):
    return svc.atualizar_config(payload)


# ---------------- Receitas ----------------
@router.get("/receitas", response_model=List[ReceitaOut])
def listar_receitas(
    tipo: Optional[TipoReceita] = Query(None),
    busca: Optional[str] = Query(None),
    svc: ReceitaService = Depends(get_receita_service),
):
    return svc.list(tipo.value if tipo else None, busca)


@router.get("/receitas/{receita_id}", response_model=ReceitaOut)
def obter_receita(receita_id: int, svc: ReceitaService = Depends(get_receita_service)):
    return svc.get(receita_id)


@router.post("/receitas", response_model=ReceitaOut, status_code=status.HTTP_201_CREATED)
def criar_receita(payload: ReceitaCreate, svc: ReceitaService = Depends(get_receita_service)):
    return svc.create(payload)


@router.put("/receitas/{receita_id}", response_model=ReceitaOut)
def atualizar_receita(receita_id: int, payload: ReceitaUpdate, svc: ReceitaService = Depends(get_receita_service)):
    return svc.update(receita_id, payload)


@router.delete("/receitas/{receita_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_receita(receita_id: int, svc: ReceitaService = Depends(get_receita_service)):
    svc.delete(receita_id)
