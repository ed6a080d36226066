from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.api.shared.schemas.schema_shared_enums import TipoItemEnum


class EnderecoSchema(BaseModel):
    cep: Optional[str] = None
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = Field(default=None, max_length=2)

    model_config = ConfigDict(from_attributes=True)


class ItemIn(BaseModel):
    """Item de orçamento/pedido. O subtotal é sempre recalculado no servidor."""
    tipo: TipoItemEnum = TipoItemEnum.PRODUTO
    produto_id: Optional[int] = None
    nome: str = Field(..., min_length=1, max_length=150)
    tamanho: Optional[str] = None
    sabor_massa: Optional[str] = None
    sabor_recheio: Optional[str] = None
    quantidade: int = Field(1, ge=1)
    preco_unitario: float = Field(0, ge=0)

    @field_validator("tamanho", "sabor_massa", "sabor_recheio", mode="before")
    @classmethod
    def _vazio_para_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ItemOut(BaseModel):
    id: int
    tipo: TipoItemEnum
    produto_id: Optional[int] = None
    nome: str
    tamanho: Optional[str] = None
    sabor_massa: Optional[str] = None
    sabor_recheio: Optional[str] = None
    quantidade: int
    preco_unitario: float
    subtotal: float

    model_config = ConfigDict(from_attributes=True)
