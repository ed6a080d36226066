# app/api/cadastros/router/router.py

from fastapi import APIRouter

from app.api.cadastros.router.admin import (
    router_clientes,
    router_colaboradores,
    router_fornecedores,
    router_produtos,
    router_sabores,
)

api_cadastros = APIRouter(
    tags=["API - Cadastros"]
)

# Routers para admin (usam get_current_user)
api_cadastros.include_router(router_clientes)
api_cadastros.include_router(router_produtos)
api_cadastros.include_router(router_sabores)
api_cadastros.include_router(router_fornecedores)
api_cadastros.include_router(router_colaboradores)
