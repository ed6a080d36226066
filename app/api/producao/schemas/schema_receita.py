from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TipoReceita(str, Enum):
    MASSA = "Massa"
    RECHEIO = "Recheio"


class RendimentoDiametro(BaseModel):
    diametro: int = Field(..., gt=0)
    quantidade_discos: float = Field(..., gt=0)


class ReceitaIngredienteIn(BaseModel):
    ingrediente_id: int
    quantidade: float = Field(..., gt=0)


class ReceitaIngredienteOut(BaseModel):
    id: int
    ingrediente_id: int
    ingrediente_nome: Optional[str] = None
    unidade: Optional[str] = None
    quantidade: float

    model_config = ConfigDict(from_attributes=True)


class ReceitaBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    tipo: TipoReceita
    modo_preparo: Optional[str] = None
    tempo_forno: Optional[int] = Field(default=None, ge=0)
    temperatura: Optional[int] = Field(default=None, ge=0)
    rendimento_descricao: Optional[str] = None
    peso_total_g: Optional[float] = Field(default=None, gt=0)
    rendimento_por_diametro: List[RendimentoDiametro] = Field(default_factory=list)

    @field_validator("nome")
    @classmethod
    def _strip_nome(cls, v: str) -> str:
        return v.strip()


class ReceitaCreate(ReceitaBase):
    ingredientes: List[ReceitaIngredienteIn] = Field(default_factory=list)


class ReceitaUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=100)
    tipo: Optional[TipoReceita] = None
    modo_preparo: Optional[str] = None
    tempo_forno: Optional[int] = Field(default=None, ge=0)
    temperatura: Optional[int] = Field(default=None, ge=0)
    rendimento_descricao: Optional[str] = None
    peso_total_g: Optional[float] = Field(default=None, gt=0)
    rendimento_por_diametro: Optional[List[RendimentoDiametro]] = None
    # quando enviado, substitui toda a lista
    ingredientes: Optional[List[ReceitaIngredienteIn]] = None


class ReceitaOut(ReceitaBase):
    id: int
    ingredientes: List[ReceitaIngredienteOut] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
