"""Inicializador do domínio Integrações (instâncias WhatsApp por empresa)."""
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

from app.api.integracoes.models import WhatsAppInstanciaModel  # noqa: F401


class IntegracoesInitializer(DomainInitializer):
    def get_domain_name(self) -> str:
        return "integracoes"

    def get_schema_name(self) -> str:
        return "integracoes"


_integracoes_initializer = IntegracoesInitializer()
register_domain(_integracoes_initializer)
