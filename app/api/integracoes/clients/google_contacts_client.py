from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

import httpx

from app.config import settings

PERSON_FIELDS = "names,emailAddresses,phoneNumbers,photos"


class GoogleContactsError(Exception):
    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _primeiro(pessoa: Dict[str, Any], campo: str, chave: str) -> Optional[str]:
    for item in pessoa.get(campo) or []:
        valor = item.get(chave)
        if valor:
            return valor
    return None


def simplificar_contato(pessoa: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "resource_name": pessoa.get("resourceName"),
        "nome": _primeiro(pessoa, "names", "displayName"),
        "telefone": _primeiro(pessoa, "phoneNumbers", "value"),
        "email": _primeiro(pessoa, "emailAddresses", "value"),
        "foto": _primeiro(pessoa, "photos", "url"),
    }


class GoogleContactsClient:
    """Leitura de contatos via Google People API com o access token do usuário."""

    def __init__(
        self,
        access_token: str,
        *,
        base_url: Optional[str] = None,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not access_token:
            raise GoogleContactsError("Access token do Google é obrigatório", 401)
        self._client = httpx.Client(
            base_url=(base_url or settings.GOOGLE_PEOPLE_API_URL).rstrip("/"),
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GoogleContactsClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def list_contacts(self, page_size: int = 100, page_token: Optional[str] = None) -> Dict[str, Any]:
        params = {
            "pageSize": page_size,
            "personFields": PERSON_FIELDS,
            "sortOrder": "FIRST_NAME_ASCENDING",
        }
        if page_token:
            params["pageToken"] = page_token
        try:
            resp = self._client.get("/people/me/connections", params=params)
        except httpx.HTTPError as e:
            raise GoogleContactsError(f"Falha de comunicação com o Google: {e}") from e

        if resp.is_error:
            try:
                mensagem = resp.json().get("error", {}).get("message")
            except ValueError:
                mensagem = None
            raise GoogleContactsError(mensagem or f"Google API error: {resp.status_code}", resp.status_code)

        data = resp.json()
        return {
            "connections": [simplificar_contato(p) for p in data.get("connections") or []],
            "next_page_token": data.get("nextPageToken"),
        }

    def iter_contacts(self, page_size: int = 100) -> Iterator[Dict[str, Any]]:
        token = None
        while True:
            pagina = self.list_contacts(page_size, token)
            yield from pagina["connections"]
            token = pagina["next_page_token"]
            if not token:
                break
