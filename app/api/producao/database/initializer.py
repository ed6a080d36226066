"""
Inicializador do domínio Produção.
Depende de `estoque.ingredientes` (ingredientes das receitas).
"""
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

from app.api.producao.models import ReceitaModel, ReceitaIngredienteModel, ConfigProducaoModel  # noqa: F401


class ProducaoInitializer(DomainInitializer):
    def get_domain_name(self) -> str:
        return "producao"

    def get_schema_name(self) -> str:
        return "producao"


_producao_initializer = ProducaoInitializer()
register_domain(_producao_initializer)
