from .router_financeiro_admin import router as router_financeiro_admin
from .router_contas_admin import router_contas_pagar, router_contas_receber

__all__ = ["router_financeiro_admin", "router_contas_pagar", "router_contas_receber"]
