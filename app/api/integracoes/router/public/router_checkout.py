from fastapi import APIRouter, HTTPException, status
from fastapi.responses import RedirectResponse

from app.api.integracoes.schemas.schema_checkout import CatalogoPlanosOut
from app.api.integracoes.services.planos import catalogo_planos, link_checkout

router = APIRouter(prefix="/api/integracoes/checkout", tags=["Public - Checkout"])


@router.get("/planos", response_model=CatalogoPlanosOut)
def listar_planos():
    return catalogo_planos()


@router.get("/{plano}", status_code=status.HTTP_307_TEMPORARY_REDIRECT)
def redirecionar_checkout(plano: str):
    url = link_checkout(plano)
    if not url:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Plano não encontrado")
    return RedirectResponse(url=url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
