from datetime import date, datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field


class TermosSchema(BaseModel):
    pagamento: str = ""
    cancelamento: str = ""
    cuidados: str = ""
    transporte: str = ""
    importante: str = ""


class HorariosSchema(BaseModel):
    dias: List[str] = Field(default_factory=list)
    horario: str = ""


class EmpresaOut(BaseModel):
    id: int
    nome: str
    slug: str
    cnpj: Optional[str] = None
    logo: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    instagram: Optional[str] = None
    cep: Optional[str] = None
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    plano: str
    trial_ate: Optional[date] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EmpresaUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=100)
    cnpj: Optional[str] = None
    logo: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    instagram: Optional[str] = None
    cep: Optional[str] = None
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = Field(default=None, max_length=2)


class TaxaEntregaConfig(BaseModel):
    valor_fixo: float = Field(0, ge=0)
    distancia_maxima_fixa: float = Field(0, ge=0)  # km
    valor_por_km: float = Field(0, ge=0)


class ConfiguracoesNegocio(BaseModel):
    prazo_minimo_pedidos: int = Field(3, ge=0)
    prazo_cancelamento: int = Field(7, ge=0)
    taxa_entrega: TaxaEntregaConfig = Field(default_factory=TaxaEntregaConfig)
    raio_maximo_entrega: Optional[float] = Field(default=None, ge=0)
    horarios: HorariosSchema = Field(default_factory=HorariosSchema)


class ConfiguracoesOut(BaseModel):
    negocio: ConfiguracoesNegocio
    termos: TermosSchema


class ConfiguracoesUpdate(BaseModel):
    negocio: Optional[ConfiguracoesNegocio] = None
    termos: Optional[TermosSchema] = None


class TaxaEntregaOut(BaseModel):
    distancia_km: float
    taxa: float
