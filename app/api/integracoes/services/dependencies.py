from typing import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.core.admin_dependencies import get_current_user
from app.api.cadastros.models.user_model import UserModel
from app.api.integracoes.clients.evolution_client import EvolutionClient
from app.api.integracoes.clients.google_contacts_client import GoogleContactsClient
from app.api.integracoes.services.service_whatsapp_instancia import (
    WhatsAppInstanciaService,
    criar_evolution_client,
)
from app.api.integracoes.services.whatsapp_pairing import PairingRegistry, pairing_registry


def get_whatsapp_instancia_service(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
) -> WhatsAppInstanciaService:
    return WhatsAppInstanciaService(db, current_user.empresa_id)


def get_evolution_factory() -> Callable[..., EvolutionClient]:
    return criar_evolution_client


def get_pairing_registry() -> PairingRegistry:
    return pairing_registry


def get_google_contacts_factory() -> Callable[[str], GoogleContactsClient]:
    return GoogleContactsClient
