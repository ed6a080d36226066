from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.shared.schemas.schema_shared_enums import TipoSaborEnum


class SaborCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    tipo: TipoSaborEnum
    descricao: Optional[str] = None
    custo_adicional: float = Field(0, ge=0)


class SaborUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=100)
    tipo: Optional[TipoSaborEnum] = None
    descricao: Optional[str] = None
    custo_adicional: Optional[float] = Field(default=None, ge=0)


class SaborOut(SaborCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
