"""
Models do bounded context de Estoque.
"""
from .model_estoque import (
    CATEGORIAS_PADRAO,
    CategoriaEstoqueModel,
    IngredienteModel,
    MovimentacaoEstoqueModel,
    TipoMovimentacaoEnum,
    UnidadeMedidaEnum,
)
from .model_adereco import AderecoModel, CompraAderecoModel, AderecoPedidoModel

__all__ = [
    "CATEGORIAS_PADRAO",
    "CategoriaEstoqueModel",
    "IngredienteModel",
    "MovimentacaoEstoqueModel",
    "TipoMovimentacaoEnum",
    "UnidadeMedidaEnum",
    "AderecoModel",
    "CompraAderecoModel",
    "AderecoPedidoModel",
]
