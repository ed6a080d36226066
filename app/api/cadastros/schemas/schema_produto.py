from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.cadastros.models.model_produto import CategoriaProduto


class ProdutoBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=120)
    categoria: CategoriaProduto = CategoriaProduto.BOLO
    preco: float = Field(0, ge=0)
    descricao: Optional[str] = None
    foto: Optional[str] = None
    tamanhos: Optional[List[str]] = None
    precos_por_tamanho: Optional[Dict[str, float]] = None
    tempo_producao: Optional[int] = Field(default=None, ge=0)
    ativo: bool = True


class ProdutoCreate(ProdutoBase):
    pass


class ProdutoUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=120)
    categoria: Optional[CategoriaProduto] = None
    preco: Optional[float] = Field(default=None, ge=0)
    descricao: Optional[str] = None
    foto: Optional[str] = None
    tamanhos: Optional[List[str]] = None
    precos_por_tamanho: Optional[Dict[str, float]] = None
    tempo_producao: Optional[int] = Field(default=None, ge=0)
    ativo: Optional[bool] = None


class ProdutoOut(ProdutoBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PrecoTamanhoOut(BaseModel):
    produto_id: int
    tamanho: Optional[str] = None
    preco: float
