from typing import Optional

from pydantic import BaseModel, Field


class ImportarContatosIn(BaseModel):
    access_token: str = Field(..., min_length=1, description="Token OAuth do Google com escopo de contatos")
    page_size: int = Field(100, ge=1, le=1000)


class ContatoGoogleOut(BaseModel):
    resource_name: Optional[str] = None
    nome: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    foto: Optional[str] = None


class ImportacaoContatosOut(BaseModel):
    importados: int
    ignorados: int
    total: int
