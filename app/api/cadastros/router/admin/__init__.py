from .router_clientes import router as router_clientes
from .router_produtos import router as router_produtos
from .router_sabores import router as router_sabores
from .router_fornecedores import router as router_fornecedores
from .router_colaboradores import router as router_colaboradores

__all__ = [
    "router_clientes",
    "router_produtos",
    "router_sabores",
    "router_fornecedores",
    "router_colaboradores",
]
