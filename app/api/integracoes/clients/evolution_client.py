from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

import httpx

from app.config import settings


class EvolutionAPIError(Exception):
    """Falha na Evolution API; `status_code` traz o HTTP retornado (0 para erro de rede)."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def normalizar_estado(estado: Optional[str]) -> str:
    """'CONNECTED' e 'connected' viram 'open'; ausência vira 'close'."""
    if not estado:
        return "close"
    estado = str(estado).lower()
    return "open" if estado == "connected" else estado


class EvolutionClient:
    """Cliente HTTP assíncrono da Evolution API (instâncias WhatsApp)."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.EVOLUTION_API_URL).rstrip("/")
        self.api_key = api_key or settings.EVOLUTION_API_KEY
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json", "apikey": self.api_key or ""},
            timeout=timeout or settings.EVOLUTION_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "EvolutionClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        if not self.api_key:
            raise EvolutionAPIError("API Key não configurada", 401)
        try:
            resp = await self._client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise EvolutionAPIError(f"Falha de comunicação com a Evolution API: {e}") from e
        if resp.is_error:
            raise EvolutionAPIError(f"Erro na API: {resp.status_code} - {resp.text}", resp.status_code)
        if not resp.content:
            return {}
        return resp.json()

    # ------------- Instâncias -------------
    async def create_instance(self, instance_name: str) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/instance/create",
            json={
                "instanceName": instance_name,
                "token": str(uuid.uuid4()),
                "qrcode": True,
                "integration": "WHATSAPP-BAILEYS",
            },
        )

    async def fetch_instances(self, instance_name: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"instanceName": instance_name} if instance_name else None
        data = await self._request("GET", "/instance/fetchInstances", params=params)
        itens = data if isinstance(data, list) else [data]

        instancias = []
        for item in itens:
            inst = item.get("instance") or {}
            nome = inst.get("instanceName") or item.get("instanceName") or item.get("name")
            if not nome:
                continue
            instancias.append({
                "instance_name": nome,
                "status": normalizar_estado(inst.get("state") or inst.get("status") or item.get("status")),
                "profile_name": item.get("profileName") or inst.get("profileName"),
                "profile_pic_url": item.get("profilePicUrl") or inst.get("profilePicUrl"),
                "owner_jid": item.get("ownerJid") or inst.get("ownerJid"),
            })
        if instance_name:
            instancias = [i for i in instancias if i["instance_name"] == instance_name]
        return instancias

    async def ensure_instance(self, instance_name: str) -> bool:
        """Cria a instância quando ela ainda não existe. Retorna True se criou."""
        if await self.fetch_instances(instance_name):
            return False
        await self.create_instance(instance_name)
        return True

    async def connect(self, instance_name: str) -> Dict[str, Any]:
        """Retorna o QR de pareamento: {code, base64, count}."""
        data = await self._request("GET", f"/instance/connect/{instance_name}")
        base64 = data.get("base64") or ""
        if base64 and not base64.startswith("data:"):
            base64 = f"data:image/png;base64,{base64}"
        return {"code": data.get("code") or "", "base64": base64, "count": data.get("count")}

    async def get_connection_state(self, instance_name: str) -> Dict[str, Any]:
        data = await self._request("GET", f"/instance/connectionState/{instance_name}")
        inst = data.get("instance") or {}
        estado = inst.get("state") or data.get("state") or data.get("status")
        return {"instance_name": inst.get("instanceName") or instance_name, "state": estado}

    async def logout(self, instance_name: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/instance/logout/{instance_name}")

    async def delete_instance(self, instance_name: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/instance/delete/{instance_name}")

    # ------------- Mensagens -------------
    async def send_text(self, instance_name: str, number: str, text: str) -> Dict[str, Any]:
        numero = "".join(ch for ch in number if ch.isdigit())
        return await self._request(
            "POST",
            f"/message/sendText/{instance_name}",
            json={"number": numero, "text": text},
        )
