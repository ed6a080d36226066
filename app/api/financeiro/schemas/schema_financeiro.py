from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.shared.schemas.schema_shared_enums import FormaPagamentoEnum


class TipoCategoriaFinanceira(str, Enum):
    RECEITA = "Receita"
    DESPESA_VARIAVEL = "DespesaVariavel"
    DESPESA_FIXA = "DespesaFixa"


class TipoTransacao(str, Enum):
    RECEITA = "Receita"
    DESPESA = "Despesa"


# ---------------- Categorias ----------------
class CategoriaFinanceiraIn(BaseModel):
    nome: str = Field(..., min_length=1, max_length=80)
    tipo: TipoCategoriaFinanceira


class CategoriaFinanceiraUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=80)
    tipo: Optional[TipoCategoriaFinanceira] = None


class CategoriaFinanceiraOut(CategoriaFinanceiraIn):
    id: int

    model_config = ConfigDict(from_attributes=True)


# ---------------- Transações ----------------
class TransacaoCreate(BaseModel):
    tipo: TipoTransacao
    descricao: str = Field(..., min_length=1, max_length=255)
    valor: float = Field(..., gt=0)
    data: date
    categoria_id: Optional[int] = None
    forma_pagamento: Optional[FormaPagamentoEnum] = None
    pedido_id: Optional[int] = None
    observacoes: Optional[str] = None


class TransacaoUpdate(BaseModel):
    tipo: Optional[TipoTransacao] = None
    descricao: Optional[str] = Field(default=None, min_length=1, max_length=255)
    valor: Optional[float] = Field(default=None, gt=0)
    data: Optional[date] = None
    categoria_id: Optional[int] = None
    forma_pagamento: Optional[FormaPagamentoEnum] = None
    observacoes: Optional[str] = None


class TransacaoOut(BaseModel):
    id: int
    tipo: TipoTransacao
    descricao: str
    valor: float
    data: date
    categoria_id: Optional[int] = None
    categoria_nome: Optional[str] = None
    forma_pagamento: Optional[str] = None
    status: str
    pedido_id: Optional[int] = None
    conta_id: Optional[int] = None
    observacoes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ---------------- Fluxo de caixa ----------------
class FluxoCaixaLinhaOut(BaseModel):
    categoria_id: int
    categoria: str
    tipo: TipoCategoriaFinanceira
    valores: List[float]
    total: float


class FluxoCaixaOut(BaseModel):
    ano: int
    meses: List[str]
    linhas: List[FluxoCaixaLinhaOut]
    totais: Dict[str, List[float]]
    saldo: List[float]
    saldo_anual: float


class FluxoCaixaCelulaIn(BaseModel):
    valor: float


# ---------------- DRE ----------------
class DRELinhaOut(BaseModel):
    categoria: str
    valor: float


class DREOut(BaseModel):
    inicio: str
    fim: str
    receita_bruta: float
    impostos: float
    receita_liquida: float
    custos_variaveis: List[DRELinhaOut]
    total_custos_variaveis: float
    margem_contribuicao: float
    despesas_fixas: List[DRELinhaOut]
    total_despesas_fixas: float
    resultado_operacional: float
    lucro_liquido: float


class DREComparativoOut(BaseModel):
    atual: DREOut
    anterior: Optional[DREOut] = None
    variacao: Optional[Dict[str, int]] = None


# ---------------- Previsão ----------------
class PrevisaoItemOut(BaseModel):
    origem: str
    referencia_id: int
    cliente: str
    descricao: str
    valor: float
    data_prevista: str


class PrevisaoJanelaOut(BaseModel):
    inicio: str
    fim: str
    total: float
    itens: List[PrevisaoItemOut]


class PrevisaoOut(BaseModel):
    semana: PrevisaoJanelaOut
    duas_semanas: PrevisaoJanelaOut
    proximo_mes: PrevisaoJanelaOut


class FinanceiroDashboardOut(BaseModel):
    receitas_mes: float
    despesas_mes: float
    saldo_mes: float
    a_receber_aberto: float
    a_pagar_aberto: float
    recentes: List[TransacaoOut]
