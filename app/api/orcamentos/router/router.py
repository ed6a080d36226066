from fastapi import APIRouter

from app.api.orcamentos.router.admin import router_orcamentos_admin

api_orcamentos = APIRouter(
    tags=["API - Orçamentos"]
)

api_orcamentos.include_router(router_orcamentos_admin)
