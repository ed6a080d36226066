"""
Router principal do bounded context de Pedidos.
"""
from fastapi import APIRouter

from app.api.pedidos.router.admin import router_pedidos_admin

api_pedidos = APIRouter(
    tags=["API - Pedidos"]
)

api_pedidos.include_router(router_pedidos_admin)
