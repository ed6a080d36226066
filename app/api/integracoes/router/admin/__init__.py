from .router_whatsapp_admin import router as router_whatsapp_admin
from .router_contatos_admin import router as router_contatos_admin

__all__ = ["router_whatsapp_admin", "router_contatos_admin"]
