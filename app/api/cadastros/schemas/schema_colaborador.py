import re
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.api.cadastros.models.model_colaborador import DIAS_SEMANA

_HORA_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class FuncaoColaborador(str, Enum):
    CONFEITEIRA = "Confeiteira"
    AUXILIAR = "Auxiliar"
    DECORADORA = "Decoradora"
    MOTORISTA = "Motorista"
    ATENDIMENTO = "Atendimento"


class StatusColaborador(str, Enum):
    ATIVO = "Ativo"
    INATIVO = "Inativo"
    FERIAS = "Férias"
    LICENCA = "Licença"


def _validar_escala(v):
    if v is None:
        return v
    invalidos = [d for d in v if d not in DIAS_SEMANA]
    if invalidos:
        raise ValueError(f"Dias inválidos na escala: {', '.join(invalidos)}")
    # mantém a ordem da semana e remove repetidos
    return [d for d in DIAS_SEMANA if d in v]


def _validar_hora(v):
    if v is None or v == "":
        return None
    if not _HORA_RE.match(v):
        raise ValueError("Horário deve estar no formato HH:MM")
    return v


class ColaboradorCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    cpf: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    funcao: FuncaoColaborador
    data_admissao: Optional[date] = None
    status: StatusColaborador = StatusColaborador.ATIVO
    escala: List[str] = Field(default_factory=list)
    horario_entrada: Optional[str] = None
    horario_saida: Optional[str] = None
    observacoes: Optional[str] = None

    _escala = field_validator("escala")(_validar_escala)
    _horarios = field_validator("horario_entrada", "horario_saida")(_validar_hora)


class ColaboradorUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, min_length=1, max_length=100)
    cpf: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    funcao: Optional[FuncaoColaborador] = None
    data_admissao: Optional[date] = None
    status: Optional[StatusColaborador] = None
    escala: Optional[List[str]] = None
    horario_entrada: Optional[str] = None
    horario_saida: Optional[str] = None
    observacoes: Optional[str] = None

    _escala = field_validator("escala")(_validar_escala)
    _horarios = field_validator("horario_entrada", "horario_saida")(_validar_hora)


class ColaboradorOut(ColaboradorCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ColaboradorEscalaItem(BaseModel):
    id: int
    nome: str
    funcao: str
    horario_entrada: Optional[str] = None
    horario_saida: Optional[str] = None


class EscalaSemanaOut(BaseModel):
    dias: Dict[str, List[ColaboradorEscalaItem]]
