from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AderecoCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=120)
    categoria: Optional[str] = None
    fornecedor_id: Optional[int] = None
    preco: float = Field(0, ge=0)
    unidade: str = "un"
    estoque: int = Field(0, ge=0)
    estoque_min: int = Field(0, ge=0)
    descricao: Optional[str] = None
    ativo: bool = True


class AderecoUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=120)
    categoria: Optional[str] = None
    fornecedor_id: Optional[int] = None
    preco: Optional[float] = Field(default=None, ge=0)
    unidade: Optional[str] = None
    estoque: Optional[int] = Field(default=None, ge=0)
    estoque_min: Optional[int] = Field(default=None, ge=0)
    descricao: Optional[str] = None
    ativo: Optional[bool] = None


class AderecoOut(AderecoCreate):
    id: int
    estoque_baixo: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CompraAderecoIn(BaseModel):
    adereco_id: int
    quantidade: int = Field(..., ge=1)
    valor_unitario: float = Field(..., ge=0)
    data: Optional[date] = None
    fornecedor_id: Optional[int] = None
    observacoes: Optional[str] = None
    lancar_despesa: bool = True


class CompraAderecoOut(BaseModel):
    id: int
    adereco_id: int
    adereco_nome: Optional[str] = None
    data: date
    quantidade: int
    valor_unitario: float
    valor_total: float
    fornecedor_id: Optional[int] = None
    observacoes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
