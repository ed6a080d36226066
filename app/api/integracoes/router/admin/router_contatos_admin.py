from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.user_model import UserModel
from app.api.integracoes.clients.google_contacts_client import GoogleContactsClient, GoogleContactsError
from app.api.integracoes.schemas.schema_contatos import ImportacaoContatosOut, ImportarContatosIn
from app.api.integracoes.services.dependencies import get_google_contacts_factory
from app.api.integracoes.services.service_contatos import ImportadorContatosGoogle
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/integracoes/admin/google-contatos",
    tags=["Admin - Integrações - Google Contatos"],
)


@router.post("/importar", response_model=ImportacaoContatosOut)
def importar_contatos(
    payload: ImportarContatosIn,
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    factory: Callable[[str], GoogleContactsClient] = Depends(get_google_contacts_factory),
):
    try:
        with factory(payload.access_token) as client:
            return ImportadorContatosGoogle(db, current_user.empresa_id, client).importar(payload.page_size)
    except GoogleContactsError as e:
        db.rollback()
        logger.error(f"[Clientes] Importação Google falhou (status={e.status_code}): {e.message}")
        raise HTTPException(status.HTTP_502_BAD_GATEWAY, f"Falha no Google Contatos: {e.message}")
