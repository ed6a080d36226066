from typing import Optional

from app.config import settings

PLANOS = {
    "basico": {
        "nome": "Básico",
        "preco": 49.0,
        "recursos": [
            "Pedidos e orçamentos ilimitados",
            "Cadastro de clientes e produtos",
            "Agenda de entregas",
        ],
    },
    "profissional": {
        "nome": "Profissional",
        "preco": 99.0,
        "recursos": [
            "Tudo do Básico",
            "Controle de estoque e fichas técnicas",
            "Planejamento de produção",
            "Financeiro completo (fluxo de caixa e DRE)",
        ],
    },
    "premium": {
        "nome": "Premium",
        "preco": 199.0,
        "recursos": [
            "Tudo do Profissional",
            "Integração com WhatsApp",
            "Importação de contatos do Google",
            "Gestão de equipe e escalas",
        ],
    },
}


def link_checkout(plano: str) -> Optional[str]:
    """URL do link de pagamento do plano, ou None se desconhecido/não configurado."""
    if plano not in PLANOS:
        return None
    return settings.CHECKOUT_LINKS.get(plano) or None


def catalogo_planos() -> dict:
    return {
        "planos": [
            {"id": pid, **dados, "disponivel": bool(settings.CHECKOUT_LINKS.get(pid))}
            for pid, dados in PLANOS.items()
        ],
        "dias_teste_gratis": settings.TRIAL_PERIOD_DAYS,
    }
