from __future__ import annotations

from contextvars import ContextVar
from typing import Optional, Tuple

# Usuário e empresa (tenant) do request atual. O get_db repassa para o RLS do Postgres.
_usuario_id: ContextVar[Optional[int]] = ContextVar("rls_usuario_id", default=None)
_empresa_id: ContextVar[Optional[int]] = ContextVar("rls_empresa_id", default=None)


def definir_contexto(usuario_id: Optional[int], empresa_id: Optional[int]) -> None:
    _usuario_id.set(usuario_id)
    _empresa_id.set(empresa_id)


def contexto_atual() -> Tuple[Optional[int], Optional[int]]:
    """(usuario_id, empresa_id); ambos None fora de um request autenticado."""
    return _usuario_id.get(), _empresa_id.get()
