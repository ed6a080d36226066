from .model_receita import ReceitaModel, ReceitaIngredienteModel, TipoReceitaEnum
from .model_config_producao import ConfigProducaoModel, RECHEIO_POR_CAMADA_PADRAO

__all__ = [
    "ReceitaModel",
    "ReceitaIngredienteModel",
    "TipoReceitaEnum",
    "ConfigProducaoModel",
    "RECHEIO_POR_CAMADA_PADRAO",
]
