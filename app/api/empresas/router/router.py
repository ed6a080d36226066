from fastapi import APIRouter

from app.api.empresas.router.admin.router_empresa_admin import router as router_empresa_admin

api_empresas = APIRouter(tags=["API - Empresas"])
api_empresas.include_router(router_empresa_admin)
