from .service_receita import ReceitaService
from .service_producao import ProducaoService

__all__ = ["ReceitaService", "ProducaoService"]
