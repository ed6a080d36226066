from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.estoque.schemas.schema_estoque import (
    CategoriaEstoqueIn,
    CategoriaEstoqueOut,
    EstoqueDashboardOut,
    IngredienteCreate,
    IngredienteOut,
    IngredienteUpdate,
    MovimentacaoIn,
    MovimentacaoOut,
    TipoMovimentacao,
)
from app.api.estoque.services.dependencies import get_movimentacao_service
from app.api.estoque.services.service_ingrediente import CategoriaEstoqueService, IngredienteService
from app.api.estoque.services.service_movimentacao import MovimentacaoService
from app.core.admin_dependencies import get_empresa_id
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/estoque/admin", tags=["Admin - Estoque"])


# ---------------- Dashboard ----------------
@router.get("/dashboard", response_model=EstoqueDashboardOut)
def dashboard_estoque(empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return IngredienteService(db, empresa_id).dashboard()


# ---------------- Categorias ----------------
@router.get("/categorias", response_model=List[CategoriaEstoqueOut])
def listar_categorias(empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return CategoriaEstoqueService(db, empresa_id).list()


@router.post("/categorias", response_model=CategoriaEstoqueOut, status_code=status.HTTP_201_CREATED)
def criar_categoria(
    payload: CategoriaEstoqueIn,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return CategoriaEstoqueService(db, empresa_id).create(payload)


@router.put("/categorias/{categoria_id}", response_model=CategoriaEstoqueOut)
def atualizar_categoria(
    categoria_id: int,
    payload: CategoriaEstoqueIn,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return CategoriaEstoqueService(db, empresa_id).update(categoria_id, payload)


@router.delete("/categorias/{categoria_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_categoria(categoria_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    CategoriaEstoqueService(db, empresa_id).delete(categoria_id)


# ---------------- Ingredientes ----------------
@router.get("/ingredientes", response_model=List[IngredienteOut])
def listar_ingredientes(
    categoria: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    ativo: Optional[bool] = Query(None),
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return IngredienteService(db, empresa_id).list(categoria=categoria, search=search, ativo=ativo)


@router.get("/ingredientes/alertas", response_model=List[IngredienteOut])
def alertas_estoque(empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return IngredienteService(db, empresa_id).alertas()


@router.get("/ingredientes/{ingrediente_id}", response_model=IngredienteOut)
def get_ingrediente(ingrediente_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    return IngredienteService(db, empresa_id).get(ingrediente_id)


@router.post("/ingredientes", response_model=IngredienteOut, status_code=status.HTTP_201_CREATED)
def criar_ingrediente(
    payload: IngredienteCreate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    logger.info(f"[Estoque] Criar ingrediente - {payload.nome}")
    return IngredienteService(db, empresa_id).create(payload)


@router.put("/ingredientes/{ingrediente_id}", response_model=IngredienteOut)
def atualizar_ingrediente(
    ingrediente_id: int,
    payload: IngredienteUpdate,
    empresa_id: int = Depends(get_empresa_id),
    db: Session = Depends(get_db),
):
    return IngredienteService(db, empresa_id).update(ingrediente_id, payload)


@router.delete("/ingredientes/{ingrediente_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_ingrediente(ingrediente_id: int, empresa_id: int = Depends(get_empresa_id), db: Session = Depends(get_db)):
    logger.info(f"[Estoque] Delete ingrediente - id={ingrediente_id}")
    IngredienteService(db, empresa_id).delete(ingrediente_id)


# ---------------- Movimentações ----------------
@router.get("/movimentacoes", response_model=List[MovimentacaoOut])
def listar_movimentacoes(
    ingrediente_id: Optional[int] = Query(None),
    tipo: Optional[TipoMovimentacao] = Query(None),
    data_inicio: Optional[date] = Query(None),
    data_fim: Optional[date] = Query(None),
    svc: MovimentacaoService = Depends(get_movimentacao_service),
):
    return svc.list(ingrediente_id, tipo.value if tipo else None, data_inicio, data_fim)


@router.post("/movimentacoes", response_model=MovimentacaoOut, status_code=status.HTTP_201_CREATED)
def registrar_movimentacao(payload: MovimentacaoIn, svc: MovimentacaoService = Depends(get_movimentacao_service)):
    return svc.registrar(payload)
