from fastapi import APIRouter

from app.api.financeiro.router.admin import (
    router_contas_pagar,
    router_contas_receber,
    router_financeiro_admin,
)

api_financeiro = APIRouter()
api_financeiro.include_router(router_financeiro_admin)
api_financeiro.include_router(router_contas_pagar)
api_financeiro.include_router(router_contas_receber)
