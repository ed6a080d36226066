from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UnidadeMedida(str, Enum):
    G = "g"
    KG = "kg"
    ML = "ml"
    L = "l"
    UN = "un"


class TipoMovimentacao(str, Enum):
    ENTRADA = "Entrada"
    SAIDA = "Saida"
    AJUSTE = "Ajuste"


# ---------------- Categorias ----------------
class CategoriaEstoqueIn(BaseModel):
    nome: str = Field(..., min_length=1, max_length=60)


class CategoriaEstoqueOut(CategoriaEstoqueIn):
    id: int

    model_config = ConfigDict(from_attributes=True)


# ---------------- Ingredientes ----------------
class IngredienteCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=120)
    unidade: UnidadeMedida = UnidadeMedida.G
    categoria: str = "Outros"
    estoque_atual: float = Field(0, ge=0)
    estoque_minimo: float = Field(0, ge=0)
    estoque_maximo: Optional[float] = Field(default=None, ge=0)
    custo_unitario: float = Field(0, ge=0)
    fornecedor_id: Optional[int] = None
    codigo_produto: Optional[str] = None
    localizacao: Optional[str] = None
    marca: Optional[str] = None
    ativo: bool = True


class IngredienteUpdate(BaseModel):
    """Estoque atual não é editável aqui: use uma movimentação de Ajuste."""
    nome: Optional[str] = Field(default=None, min_length=1, max_length=120)
    unidade: Optional[UnidadeMedida] = None
    categoria: Optional[str] = None
    estoque_minimo: Optional[float] = Field(default=None, ge=0)
    estoque_maximo: Optional[float] = Field(default=None, ge=0)
    custo_unitario: Optional[float] = Field(default=None, ge=0)
    fornecedor_id: Optional[int] = None
    codigo_produto: Optional[str] = None
    localizacao: Optional[str] = None
    marca: Optional[str] = None
    ativo: Optional[bool] = None


class IngredienteOut(BaseModel):
    id: int
    nome: str
    unidade: UnidadeMedida
    categoria: str
    estoque_atual: float
    estoque_minimo: float
    estoque_maximo: Optional[float] = None
    custo_unitario: float
    custo_medio: Optional[float] = None
    fornecedor_id: Optional[int] = None
    codigo_produto: Optional[str] = None
    localizacao: Optional[str] = None
    marca: Optional[str] = None
    ultima_compra: Optional[date] = None
    ativo: bool
    estoque_baixo: bool

    model_config = ConfigDict(from_attributes=True)


# ---------------- Movimentações ----------------
class MovimentacaoIn(BaseModel):
    ingrediente_id: int
    tipo: TipoMovimentacao
    # Entrada/Saida: quantidade movimentada; Ajuste: novo estoque absoluto
    quantidade: float = Field(..., ge=0)
    valor_unitario: Optional[float] = Field(default=None, ge=0)
    motivo: Optional[str] = None
    pedido_id: Optional[int] = None
    nota_fiscal: Optional[str] = None
    fornecedor_id: Optional[int] = None
    observacoes: Optional[str] = None
    lancar_despesa: bool = False


class MovimentacaoOut(BaseModel):
    id: int
    ingrediente_id: int
    ingrediente_nome: Optional[str] = None
    tipo: TipoMovimentacao
    data: datetime
    quantidade: float
    quantidade_anterior: float
    quantidade_posterior: float
    valor_unitario: Optional[float] = None
    valor_total: Optional[float] = None
    motivo: Optional[str] = None
    pedido_id: Optional[int] = None
    nota_fiscal: Optional[str] = None
    fornecedor_id: Optional[int] = None
    usuario: Optional[str] = None
    observacoes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EstoqueDashboardOut(BaseModel):
    valor_total_estoque: float
    itens_baixo_estoque: int
    total_itens: int
    alertas: List[IngredienteOut]
