from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecheioPorCamada(BaseModel):
    diametro: int = Field(..., gt=0)
    gramas: float = Field(..., gt=0)


class ConfigProducaoIn(BaseModel):
    recheio_por_camada: Optional[List[RecheioPorCamada]] = None
    antecedencia_minima: Optional[int] = Field(default=None, ge=0)
    tempos_producao: Optional[Dict[str, int]] = None


class ConfigProducaoOut(BaseModel):
    recheio_por_camada: List[RecheioPorCamada]
    antecedencia_minima: int
    tempos_producao: Optional[Dict[str, int]] = None

    model_config = ConfigDict(from_attributes=True)


class ContagemSaborOut(BaseModel):
    nome: str
    quantidade: int


class ResumoProducaoOut(BaseModel):
    inicio: str
    fim: str
    total_pedidos: int
    total_itens: int
    massas: List[ContagemSaborOut]
    recheios: List[ContagemSaborOut]


class MassaDiametroOut(BaseModel):
    diametro: int
    bolos: int
    discos: int
    lotes: float


class PlanoMassaOut(BaseModel):
    nome: str
    receita_id: Optional[int] = None
    total_lotes: float
    diametros: List[MassaDiametroOut]


class RecheioDiametroOut(BaseModel):
    diametro: int
    bolos: int
    camadas: int
    peso_g: float


class PlanoRecheioOut(BaseModel):
    nome: str
    receita_id: Optional[int] = None
    peso_total_g: float
    total_panelas: float
    diametros: List[RecheioDiametroOut]


class ItemListaComprasOut(BaseModel):
    ingrediente_id: int
    nome: str
    categoria: str
    unidade: str
    quantidade_total: float
    estoque_atual: float
    falta: float
    insuficiente: bool


class PlanoProducaoOut(BaseModel):
    inicio: str
    fim: str
    massas: List[PlanoMassaOut]
    recheios: List[PlanoRecheioOut]
    lista_compras: List[ItemListaComprasOut]
