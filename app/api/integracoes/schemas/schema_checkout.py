from typing import List

from pydantic import BaseModel


class PlanoOut(BaseModel):
    id: str
    nome: str
    preco: float
    recursos: List[str]
    disponivel: bool


class CatalogoPlanosOut(BaseModel):
    planos: List[PlanoOut]
    dias_teste_gratis: int
