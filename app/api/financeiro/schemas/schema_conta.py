from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.api.shared.schemas.schema_shared_enums import FormaPagamentoEnum
from app.api.shared.schemas.validators import rejeitar_nulo


class TipoConta(str, Enum):
    PAGAR = "pagar"
    RECEBER = "receber"


class StatusConta(str, Enum):
    PENDENTE = "pendente"
    PARCIAL = "parcial"
    PAGO = "pago"
    VENCIDO = "vencido"


class ContaCreate(BaseModel):
    fornecedor_id: Optional[int] = None
    cliente_id: Optional[int] = None
    contraparte_nome: Optional[str] = Field(default=None, max_length=150)
    descricao: str = Field(..., min_length=1, max_length=255)
    categoria_id: Optional[int] = None
    valor_total: float = Field(..., gt=0)
    data_vencimento: date
    observacoes: Optional[str] = None

    @model_validator(mode="after")
    def _exige_contraparte(self):
        if not (self.fornecedor_id or self.cliente_id or (self.contraparte_nome or "").strip()):
            raise ValueError("Informe o fornecedor/cliente ou o nome da contraparte")
        return self


class ContaUpdate(BaseModel):
    contraparte_nome: Optional[str] = Field(default=None, max_length=150)
    descricao: Optional[str] = Field(default=None, min_length=1, max_length=255)
    categoria_id: Optional[int] = None
    valor_total: Optional[float] = Field(default=None, gt=0)
    data_vencimento: Optional[date] = None
    observacoes: Optional[str] = None

    _obrigatorios = field_validator("contraparte_nome", "descricao", "valor_total", "data_vencimento")(rejeitar_nulo)


class PagamentoContaIn(BaseModel):
    valor: float = Field(..., gt=0)
    data: Optional[date] = None
    forma_pagamento: Optional[FormaPagamentoEnum] = None
    observacao: Optional[str] = Field(default=None, max_length=255)
    lancar_fluxo_caixa: bool = True


class PagamentoContaOut(BaseModel):
    id: int
    data: date
    valor: float
    forma_pagamento: Optional[str] = None
    observacao: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ContaOut(BaseModel):
    id: int
    tipo: TipoConta
    fornecedor_id: Optional[int] = None
    cliente_id: Optional[int] = None
    contraparte_nome: str
    descricao: str
    categoria_id: Optional[int] = None
    categoria_nome: Optional[str] = None
    valor_total: float
    valor_pago: float
    saldo_restante: float
    data_vencimento: date
    status: StatusConta
    observacoes: Optional[str] = None
    pagamentos: List[PagamentoContaOut] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class ResumoContasOut(BaseModel):
    total_aberto: float
    qtd_aberto: int
    total_pago: float
    qtd_pago: int
    total_vencido: float
    qtd_vencido: int
    previsto_proximo_mes: float
    qtd_previsto: int
