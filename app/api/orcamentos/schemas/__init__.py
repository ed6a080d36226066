from .schema_orcamento import (
    AprovacaoOut,
    OrcamentoCreate,
    OrcamentoHistoricoOut,
    OrcamentoOut,
    OrcamentoUpdate,
)

__all__ = [
    "AprovacaoOut",
    "OrcamentoCreate",
    "OrcamentoHistoricoOut",
    "OrcamentoOut",
    "OrcamentoUpdate",
]
