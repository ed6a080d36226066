from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.api.pedidos.schemas.schema_pedido_status_historico import PedidoHistoricoOut
from app.api.shared.schemas.schema_item import EnderecoSchema, ItemIn, ItemOut
from app.api.shared.schemas.schema_shared_enums import (
    FormaPagamentoEnum,
    PedidoStatusEnum,
    PrioridadeEnum,
    StatusPagamentoEnum,
    TipoEntregaEnum,
)
from app.api.shared.schemas.validators import rejeitar_nulo


def _validar_hora(v):
    if v in (None, ""):
        return None
    partes = v.split(":")
    if len(partes) < 2 or not all(p.isdigit() for p in partes[:2]):
        raise ValueError("Horário deve estar no formato HH:MM")
    h, m = int(partes[0]), int(partes[1])
    if not (0 <= h < 24 and 0 <= m < 60):
        raise ValueError("Horário inválido")
    return f"{h:02d}:{m:02d}"


# ---------------- Requests ----------------
class PedidoCreate(BaseModel):
    cliente_id: Optional[int] = None
    cliente_nome: Optional[str] = Field(default=None, max_length=100)
    cliente_telefone: Optional[str] = None
    cliente_email: Optional[str] = None

    data_entrega: date
    hora_entrega: Optional[str] = None
    tipo_entrega: TipoEntregaEnum = TipoEntregaEnum.RETIRADA
    endereco: Optional[EnderecoSchema] = None
    taxa_entrega: float = Field(0, ge=0)
    distancia: Optional[float] = Field(default=None, ge=0)
    instrucoes: Optional[str] = None

    itens: List[ItemIn] = Field(..., min_length=1)

    decoracao_descricao: Optional[str] = None
    decoracao_imagens: List[str] = Field(default_factory=list)
    decoracao_observacoes: Optional[str] = None
    observacoes: Optional[str] = None

    valor_pago: float = Field(0, ge=0)
    forma_pagamento: Optional[FormaPagamentoEnum] = None
    status: PedidoStatusEnum = PedidoStatusEnum.PAGAMENTO_PENDENTE
    prioridade: PrioridadeEnum = PrioridadeEnum.NORMAL

    _hora = field_validator("hora_entrega")(_validar_hora)

    @model_validator(mode="after")
    def _cliente_obrigatorio(self):
        if self.cliente_id is None and not (self.cliente_nome or "").strip():
            raise ValueError("Informe cliente_id ou cliente_nome")
        return self


class PedidoUpdate(BaseModel):
    cliente_id: Optional[int] = None
    cliente_nome: Optional[str] = Field(default=None, max_length=100)
    cliente_telefone: Optional[str] = None
    cliente_email: Optional[str] = None

    data_entrega: Optional[date] = None
    hora_entrega: Optional[str] = None
    tipo_entrega: Optional[TipoEntregaEnum] = None
    endereco: Optional[EnderecoSchema] = None
    taxa_entrega: Optional[float] = Field(default=None, ge=0)
    distancia: Optional[float] = Field(default=None, ge=0)
    instrucoes: Optional[str] = None

    itens: Optional[List[ItemIn]] = Field(default=None, min_length=1)

    decoracao_descricao: Optional[str] = None
    decoracao_imagens: Optional[List[str]] = None
    decoracao_observacoes: Optional[str] = None
    observacoes: Optional[str] = None

    valor_pago: Optional[float] = Field(default=None, ge=0)
    forma_pagamento: Optional[FormaPagamentoEnum] = None
    status: Optional[PedidoStatusEnum] = None
    prioridade: Optional[PrioridadeEnum] = None

    _hora = field_validator("hora_entrega")(_validar_hora)
    _obrigatorios = field_validator(
        "cliente_nome", "data_entrega", "tipo_entrega", "taxa_entrega", "valor_pago", "status", "prioridade"
    )(rejeitar_nulo)


class PagamentoPedidoIn(BaseModel):
    valor: float = Field(..., gt=0)
    forma_pagamento: FormaPagamentoEnum = FormaPagamentoEnum.PIX
    data: Optional[date] = None
    lancar_fluxo_caixa: bool = True
    observacao: Optional[str] = None


class AderecoPedidoIn(BaseModel):
    adereco_id: int
    quantidade: int = Field(1, ge=1)
    reservado: bool = False
    observacoes: Optional[str] = None


# ---------------- Responses ----------------
class AderecoPedidoOut(BaseModel):
    id: int
    adereco_id: int
    adereco_nome: Optional[str] = None
    quantidade: int
    reservado: bool
    observacoes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PedidoResumoOut(BaseModel):
    """Versão enxuta usada no kanban, calendário e semana."""
    id: int
    numero: int
    cliente_nome: str
    cliente_telefone: Optional[str] = None
    data_entrega: date
    hora_entrega: Optional[str] = None
    tipo_entrega: TipoEntregaEnum
    status: PedidoStatusEnum
    prioridade: PrioridadeEnum
    valor_total: float
    saldo_pendente: float
    status_pagamento: StatusPagamentoEnum

    model_config = ConfigDict(from_attributes=True)


class PedidoOut(PedidoResumoOut):
    orcamento_id: Optional[int] = None
    cliente_id: Optional[int] = None
    cliente_email: Optional[str] = None
    endereco: Optional[EnderecoSchema] = None
    taxa_entrega: float
    distancia: Optional[float] = None
    instrucoes: Optional[str] = None
    itens: List[ItemOut] = Field(default_factory=list)
    decoracao_descricao: Optional[str] = None
    decoracao_imagens: Optional[List[str]] = None
    decoracao_observacoes: Optional[str] = None
    observacoes: Optional[str] = None
    valor_pago: float
    forma_pagamento: Optional[str] = None
    aderecos: List[AderecoPedidoOut] = Field(default_factory=list)
    historico: List[PedidoHistoricoOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class KanbanColunaOut(BaseModel):
    status: PedidoStatusEnum
    total: int
    pedidos: List[PedidoResumoOut]


class KanbanOut(BaseModel):
    colunas: List[KanbanColunaOut]


class CalendarioDiaOut(BaseModel):
    data: date
    pedidos: List[PedidoResumoOut]


class CalendarioOut(BaseModel):
    inicio: date
    fim: date
    dias: List[CalendarioDiaOut]


class PedidosDashboardOut(BaseModel):
    entregas_hoje: int
    pedidos_semana: int
    em_producao: int
    pagamento_pendente: int
    saldo_pendente_total: float


class WhatsappLinkOut(BaseModel):
    telefone: str
    url: str
