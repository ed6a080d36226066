from .router_producao_admin import router as router_producao_admin

__all__ = ["router_producao_admin"]
