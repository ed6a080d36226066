from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoriaFornecedor(str, Enum):
    INGREDIENTES = "Ingredientes"
    EMBALAGENS = "Embalagens"
    DECORACOES = "Decorações"
    SERVICOS = "Serviços"
    EQUIPAMENTOS = "Equipamentos"


class DadosBancariosSchema(BaseModel):
    banco: Optional[str] = None
    agencia: Optional[str] = None
    conta: Optional[str] = None
    pix: Optional[str] = None


class FornecedorBase(BaseModel):
    razao_social: Optional[str] = Field(default=None, max_length=150)
    nome_fantasia: str = Field(..., min_length=1, max_length=150)
    cnpj: Optional[str] = Field(default=None, max_length=20)
    categoria: CategoriaFornecedor = CategoriaFornecedor.INGREDIENTES
    telefone: Optional[str] = None
    email: Optional[str] = None
    contato: Optional[str] = None
    cep: Optional[str] = None
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = Field(default=None, max_length=2)
    dados_bancarios: Optional[DadosBancariosSchema] = None
    observacoes: Optional[str] = None
    ativo: bool = True

    @field_validator("cnpj")
    @classmethod
    def limpar_cnpj(cls, v):
        if v is None:
            return v
        return "".join(ch for ch in v if ch.isdigit()) or None


class FornecedorCreate(FornecedorBase):
    pass


class FornecedorUpdate(BaseModel):
    razao_social: Optional[str] = None
    nome_fantasia: Optional[str] = Field(default=None, min_length=1, max_length=150)
    cnpj: Optional[str] = None
    categoria: Optional[CategoriaFornecedor] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    contato: Optional[str] = None
    cep: Optional[str] = None
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = Field(default=None, max_length=2)
    dados_bancarios: Optional[DadosBancariosSchema] = None
    observacoes: Optional[str] = None
    ativo: Optional[bool] = None


class FornecedorOut(FornecedorBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
