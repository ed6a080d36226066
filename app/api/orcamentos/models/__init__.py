from .model_orcamento import (
    OrcamentoModel,
    OrcamentoItemModel,
    OrcamentoHistoricoModel,
    OrcamentoStatusSAEnum,
)

__all__ = [
    "OrcamentoModel",
    "OrcamentoItemModel",
    "OrcamentoHistoricoModel",
    "OrcamentoStatusSAEnum",
]
