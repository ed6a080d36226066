from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ClienteOut(BaseModel):
    id: int
    nome: str
    cpf: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    foto: Optional[str] = None
    observacoes: Optional[str] = None
    origem: str
    cep: Optional[str] = None
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    ativo: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class _ClienteBase(BaseModel):
    @model_validator(mode='before')
    @classmethod
    def normalize_empty_strings(cls, data):
        """Converte strings vazias para None em campos opcionais."""
        if isinstance(data, dict):
            for campo in ("cpf", "telefone", "email", "foto", "observacoes", "cep", "estado"):
                valor = data.get(campo)
                if isinstance(valor, str):
                    valor = valor.strip()
                    data[campo] = valor or None
        return data


class ClienteCreate(_ClienteBase):
    nome: str = Field(..., min_length=1, max_length=100)
    cpf: Optional[str] = Field(default=None, max_length=14)
    telefone: Optional[str] = Field(default=None, max_length=30)
    email: Optional[str] = Field(default=None, max_length=100)
    foto: Optional[str] = None
    observacoes: Optional[str] = None
    cep: Optional[str] = None
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = Field(default=None, max_length=2)


class ClienteUpdate(_ClienteBase):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=100)
    cpf: Optional[str] = Field(default=None, max_length=14)
    telefone: Optional[str] = Field(default=None, max_length=30)
    email: Optional[str] = Field(default=None, max_length=100)
    foto: Optional[str] = None
    observacoes: Optional[str] = None
    cep: Optional[str] = None
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = Field(default=None, max_length=2)
    ativo: Optional[bool] = None
