"""Infraestrutura compartilhada do banco (Postgres)."""
from .timezone import configurar_timezone
from .schemas import criar_schemas
from .enums import criar_enums

__all__ = ["configurar_timezone", "criar_schemas", "criar_enums"]
