from fastapi import APIRouter

from app.api.estoque.router.admin import router_aderecos_admin, router_estoque_admin

api_estoque = APIRouter(
    tags=["API - Estoque"]
)

api_estoque.include_router(router_estoque_admin)
api_estoque.include_router(router_aderecos_admin)
