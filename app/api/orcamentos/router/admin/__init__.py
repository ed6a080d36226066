from .router_orcamentos_admin import router as router_orcamentos_admin

__all__ = ["router_orcamentos_admin"]
