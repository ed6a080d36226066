from datetime import date, datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from app.api.empresas.schemas.schema_empresa import TermosSchema
from app.api.shared.schemas.schema_item import EnderecoSchema, ItemIn, ItemOut
from app.api.shared.schemas.schema_shared_enums import OrcamentoStatusEnum, TipoEntregaEnum
from app.api.shared.schemas.validators import rejeitar_nulo


class OrcamentoCreate(BaseModel):
    cliente_id: Optional[int] = None
    cliente_nome: Optional[str] = Field(default=None, max_length=100)
    cliente_telefone: Optional[str] = None
    cliente_email: Optional[str] = None
    data_validade: Optional[date] = None

    itens: List[ItemIn] = Field(..., min_length=1)

    tipo_entrega: TipoEntregaEnum = TipoEntregaEnum.RETIRADA
    data_entrega: Optional[date] = None
    hora_entrega: Optional[str] = None
    endereco: Optional[EnderecoSchema] = None
    taxa_entrega: float = Field(0, ge=0)
    distancia: Optional[float] = Field(default=None, ge=0)
    instrucoes_retirada: Optional[str] = None

    decoracao_descricao: Optional[str] = None
    decoracao_imagens: List[str] = Field(default_factory=list)
    decoracao_observacoes: Optional[str] = None
    observacoes: Optional[str] = None

    termos: Optional[TermosSchema] = None

    @model_validator(mode="after")
    def _cliente_obrigatorio(self):
        if self.cliente_id is None and not (self.cliente_nome or "").strip():
            raise ValueError("Informe cliente_id ou cliente_nome")
        return self


class OrcamentoUpdate(BaseModel):
    cliente_id: Optional[int] = None
    cliente_nome: Optional[str] = Field(default=None, max_length=100)
    cliente_telefone: Optional[str] = None
    cliente_email: Optional[str] = None
    data_validade: Optional[date] = None
    itens: Optional[List[ItemIn]] = Field(default=None, min_length=1)
    tipo_entrega: Optional[TipoEntregaEnum] = None
    data_entrega: Optional[date] = None
    hora_entrega: Optional[str] = None
    endereco: Optional[EnderecoSchema] = None
    taxa_entrega: Optional[float] = Field(default=None, ge=0)
    distancia: Optional[float] = Field(default=None, ge=0)
    instrucoes_retirada: Optional[str] = None
    decoracao_descricao: Optional[str] = None
    decoracao_imagens: Optional[List[str]] = None
    decoracao_observacoes: Optional[str] = None
    observacoes: Optional[str] = None
    termos: Optional[TermosSchema] = None

    _obrigatorios = field_validator("cliente_nome", "tipo_entrega", "taxa_entrega")(rejeitar_nulo)


class OrcamentoHistoricoOut(BaseModel):
    id: int
    acao: str
    usuario: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrcamentoOut(BaseModel):
    id: int
    numero: int
    # Pendente/Enviado vencidos são lidos como Expirado
    status: OrcamentoStatusEnum = Field(validation_alias=AliasChoices("status_atual", "status"))
    data_validade: Optional[date] = None
    cliente_id: Optional[int] = None
    cliente_nome: str
    cliente_telefone: Optional[str] = None
    cliente_email: Optional[str] = None
    itens: List[ItemOut] = Field(default_factory=list)
    tipo_entrega: TipoEntregaEnum
    data_entrega: Optional[date] = None
    hora_entrega: Optional[str] = None
    endereco: Optional[EnderecoSchema] = None
    taxa_entrega: float
    distancia: Optional[float] = None
    instrucoes_retirada: Optional[str] = None
    decoracao_descricao: Optional[str] = None
    decoracao_imagens: Optional[List[str]] = None
    decoracao_observacoes: Optional[str] = None
    observacoes: Optional[str] = None
    termos: Optional[TermosSchema] = None
    valor_total: float
    pedido_id: Optional[int] = None
    historico: List[OrcamentoHistoricoOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AprovacaoOut(BaseModel):
    orcamento: OrcamentoOut
    pedido_id: int
    pedido_numero: int
