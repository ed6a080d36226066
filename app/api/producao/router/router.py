from fastapi import APIRouter

from app.api.producao.router.admin import router_producao_admin

api_producao = APIRouter()
api_producao.include_router(router_producao_admin)
