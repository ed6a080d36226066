from fastapi import APIRouter

from app.api.integracoes.router.admin import router_contatos_admin, router_whatsapp_admin
from app.api.integracoes.router.public import router_checkout

api_integracoes = APIRouter()
api_integracoes.include_router(router_checkout)
api_integracoes.include_router(router_whatsapp_admin)
api_integracoes.include_router(router_contatos_admin)
