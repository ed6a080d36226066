from .router_estoque_admin import router as router_estoque_admin
from .router_aderecos_admin import router as router_aderecos_admin

__all__ = ["router_estoque_admin", "router_aderecos_admin"]
