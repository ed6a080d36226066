"""
Sessão de pareamento do WhatsApp (QR code) por instância.

Estados: loading -> qr -> verifying -> connected | error.
Duas tarefas asyncio rodam em paralelo enquanto a sessão está viva:
  - polling do estado da conexão (a cada `intervalo_polling` segundos);
  - renovação do QR (a cada `intervalo_qr` segundos, só no estado `qr`).
Ambas param ao atingir estado terminal ou no cancelamento; o cliente HTTP
é fechado nos dois casos.
"""
from __future__ import annotations

import asyncio
import time
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from app.api.integracoes.clients.evolution_client import EvolutionAPIError, EvolutionClient
from app.utils.logger import logger

ESTADOS_VERIFICANDO = {"connecting", "authenticating"}
ESTADOS_CONECTADO = {"open", "CONNECTED", "connected"}


class StatusPareamento(str, Enum):
    LOADING = "loading"
    QR = "qr"
    VERIFYING = "verifying"
    CONNECTED = "connected"
    ERROR = "error"


TERMINAIS = {StatusPareamento.CONNECTED, StatusPareamento.ERROR}


class WhatsAppPairingSession:
    def __init__(
        self,
        instance_name: str,
        client: EvolutionClient,
        *,
        intervalo_polling: float = 2.0,
        intervalo_qr: float = 30.0,
        max_falhas: int = 5,
    ) -> None:
        self.instance_name = instance_name
        self.client = client
        self.intervalo_polling = intervalo_polling
        self.intervalo_qr = intervalo_qr
        self.max_falhas = max_falhas

        self.status = StatusPareamento.LOADING
        self.qr_base64: Optional[str] = None
        self.qr_code: Optional[str] = None
        self.ultimo_estado: Optional[str] = None
        self.erro: Optional[str] = None
        self.falhas = 0
        self._qr_gerado_em: Optional[float] = None
        self._poll_task: Optional[asyncio.Task] = None
        self._qr_task: Optional[asyncio.Task] = None
        self._cliente_fechado = False

    # ------------- Ciclo de vida -------------
    async def start(self) -> dict:
        try:
            await self.client.ensure_instance(self.instance_name)
            await self._buscar_qr()
        except EvolutionAPIError as e:
            self._falhar(f"Erro ao gerar QR Code: {e.message}")
            await self._fechar_cliente()
            return self.snapshot()

        self.status = StatusPareamento.QR
        self._poll_task = asyncio.create_task(self._loop_polling())
        self._qr_task = asyncio.create_task(self._loop_qr())
        logger.info(f"[WhatsApp] Pareamento iniciado - instancia={self.instance_name}")
        return self.snapshot()

    async def cancel(self) -> None:
        await self._parar_tarefas()
        await self._fechar_cliente()
        logger.info(f"[WhatsApp] Pareamento cancelado - instancia={self.instance_name}")

    @property
    def ativo(self) -> bool:
        return self.status not in TERMINAIS

    @property
    def tarefas(self) -> Tuple[Optional[asyncio.Task], Optional[asyncio.Task]]:
        return self._poll_task, self._qr_task

    def snapshot(self) -> dict:
        restante = None
        if self.status == StatusPareamento.QR and self._qr_gerado_em is not None:
            restante = max(0, int(round(self.intervalo_qr - (time.monotonic() - self._qr_gerado_em))))
        return {
            "instance_name": self.instance_name,
            "status": self.status.value,
            "qr_base64": self.qr_base64 if self.status in (StatusPareamento.QR, StatusPareamento.VERIFYING) else None,
            "countdown": restante,
            "ultimo_estado": self.ultimo_estado,
            "erro": self.erro,
        }

    # ------------- Internos -------------
    async def _buscar_qr(self) -> None:
        qr = await self.client.connect(self.instance_name)
        self.qr_base64 = qr.get("base64")
        self.qr_code = qr.get("code")
        self._qr_gerado_em = time.monotonic()

    async def _loop_polling(self) -> None:
        while self.ativo:
            await asyncio.sleep(self.intervalo_polling)
            try:
                estado = (await self.client.get_connection_state(self.instance_name)).get("state")
            except EvolutionAPIError as e:
                self.falhas += 1
                logger.warning(f"[WhatsApp] Falha ao consultar estado ({self.falhas}/{self.max_falhas}): {e.message}")
                if self.falhas >= self.max_falhas:
                    self._falhar("Não foi possível verificar a conexão com o WhatsApp")
                continue
            self.falhas = 0
            self._aplicar_estado(estado)
        await self._fechar_cliente()

    async def _loop_qr(self) -> None:
        while self.ativo:
            await asyncio.sleep(self.intervalo_qr)
            if self.status != StatusPareamento.QR:
                # verifying ou terminal: countdown encerrado
                return
            try:
                await self._buscar_qr()
            except EvolutionAPIError as e:
                self._falhar(f"Erro ao renovar QR Code: {e.message}")
                await self._fechar_cliente()

    def _aplicar_estado(self, estado: Optional[str]) -> None:
        self.ultimo_estado = estado
        if estado in ESTADOS_CONECTADO:
            self.status = StatusPareamento.CONNECTED
            logger.info(f"[WhatsApp] Instância conectada - {self.instance_name}")
            self._cancelar_qr()
        elif estado in ESTADOS_VERIFICANDO and self.status == StatusPareamento.QR:
            self.status = StatusPareamento.VERIFYING
            self._cancelar_qr()

    def _cancelar_qr(self) -> None:
        if self._qr_task and not self._qr_task.done() and self._qr_task is not asyncio.current_task():
            self._qr_task.cancel()

    def _falhar(self, mensagem: str) -> None:
        self.status = StatusPareamento.ERROR
        self.erro = mensagem
        logger.error(f"[WhatsApp] {mensagem} - instancia={self.instance_name}")
        self._cancelar_qr()
        if self._poll_task and not self._poll_task.done() and self._poll_task is not asyncio.current_task():
            self._poll_task.cancel()

    async def _fechar_cliente(self) -> None:
        if self._cliente_fechado:
            return
        self._cliente_fechado = True
        await self.client.close()

    async def _parar_tarefas(self) -> None:
        atual = asyncio.current_task()
        pendentes = [t for t in (self._poll_task, self._qr_task) if t and not t.done() and t is not atual]
        for t in pendentes:
            t.cancel()
        if pendentes:
            await asyncio.gather(*pendentes, return_exceptions=True)


class PairingRegistry:
    """Sessões em memória por (empresa_id, instance_name)."""

    def __init__(self, session_factory: Callable[..., WhatsAppPairingSession] = WhatsAppPairingSession):
        self._sessoes: Dict[Tuple[int, str], WhatsAppPairingSession] = {}
        self._session_factory = session_factory

    def get(self, empresa_id: int, instance_name: str) -> Optional[WhatsAppPairingSession]:
        return self._sessoes.get((empresa_id, instance_name))

    async def start(self, empresa_id: int, instance_name: str, client: EvolutionClient, **opcoes) -> WhatsAppPairingSession:
        await self.cancel(empresa_id, instance_name)
        sessao = self._session_factory(instance_name, client, **opcoes)
        self._sessoes[(empresa_id, instance_name)] = sessao
        await sessao.start()
        return sessao

    def descartar(self, empresa_id: int, instance_name: str) -> None:
        """Remove uma sessão já encerrada (conectada ou com erro)."""
        self._sessoes.pop((empresa_id, instance_name), None)

    async def cancel(self, empresa_id: int, instance_name: str) -> bool:
        sessao = self._sessoes.pop((empresa_id, instance_name), None)
        if sessao is None:
            return False
        await sessao.cancel()
        return True

    async def cancel_all(self) -> None:
        for empresa_id, instance_name in list(self._sessoes):
            await self.cancel(empresa_id, instance_name)


pairing_registry = PairingRegistry()
