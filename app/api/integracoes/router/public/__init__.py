from .router_checkout import router as router_checkout

__all__ = ["router_checkout"]
