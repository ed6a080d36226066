from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.cadastros.models.user_model import UserModel
from app.api.integracoes.clients.evolution_client import EvolutionAPIError, EvolutionClient
from app.api.integracoes.schemas.schema_whatsapp import (
    EnviarMensagemIn,
    EstadoConexaoOut,
    InstanciasRemotasOut,
    PareamentoOut,
    WhatsAppInstanciaCreate,
    WhatsAppInstanciaOut,
    WhatsAppInstanciaUpdate,
)
from app.api.integracoes.services.dependencies import (
    get_evolution_factory,
    get_pairing_registry,
    get_whatsapp_instancia_service,
)
from app.api.integracoes.services.service_whatsapp_instancia import WhatsAppInstanciaService
from app.api.integracoes.services.whatsapp_pairing import PairingRegistry, StatusPareamento
from app.core.admin_dependencies import get_current_user
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/integracoes/admin/whatsapp",
    tags=["Admin - Integrações - WhatsApp"],
    dependencies=[Depends(get_current_user)],
)


def _erro_gateway(e: EvolutionAPIError) -> HTTPException:
    logger.error(f"[WhatsApp] Evolution API falhou (status={e.status_code}): {e.message}")
    return HTTPException(status.HTTP_502_BAD_GATEWAY, f"Falha na Evolution API: {e.message}")


# ---------------- Instâncias (configuração) ----------------
@router.get("/instancias", response_model=List[WhatsAppInstanciaOut])
def listar_instancias(svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service)):
    return svc.list()


@router.post("/instancias", response_model=WhatsAppInstanciaOut, status_code=status.HTTP_201_CREATED)
def criar_instancia(
    payload: WhatsAppInstanciaCreate,
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
):
    return svc.create(payload)


@router.put("/instancias/{instancia_id}", response_model=WhatsAppInstanciaOut)
def atualizar_instancia(
    instancia_id: int,
    payload: WhatsAppInstanciaUpdate,
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
):
    return svc.update(instancia_id, payload)


@router.post("/instancias/{instancia_id}/ativar", response_model=WhatsAppInstanciaOut)
def ativar_instancia(instancia_id: int, svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service)):
    return svc.ativar(instancia_id)


@router.delete("/instancias/{instancia_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deletar_instancia(
    instancia_id: int,
    remover_remota: bool = Query(False, description="Também apaga a instância na Evolution API"),
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
    factory: Callable[..., EvolutionClient] = Depends(get_evolution_factory),
):
    instancia = svc.get(instancia_id)
    if remover_remota:
        async with factory(instancia) as client:
            try:
                await client.delete_instance(instancia.instance_name)
            except EvolutionAPIError as e:
                raise _erro_gateway(e)
    svc.delete(instancia_id)


# ---------------- Evolution API ----------------
@router.get("/remotas", response_model=InstanciasRemotasOut)
async def listar_instancias_remotas(
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
    factory: Callable[..., EvolutionClient] = Depends(get_evolution_factory),
):
    async with factory(svc.get_ativa()) as client:
        try:
            return {"instancias": await client.fetch_instances()}
        except EvolutionAPIError as e:
            raise _erro_gateway(e)


@router.get("/instancias/{instancia_id}/estado", response_model=EstadoConexaoOut)
async def estado_instancia(
    instancia_id: int,
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
    factory: Callable[..., EvolutionClient] = Depends(get_evolution_factory),
):
    instancia = svc.get(instancia_id)
    async with factory(instancia) as client:
        try:
            estado = await client.get_connection_state(instancia.instance_name)
        except EvolutionAPIError as e:
            raise _erro_gateway(e)
    svc.registrar_estado(instancia.instance_name, estado.get("state"))
    return estado


@router.post("/instancias/{instancia_id}/logout", status_code=status.HTTP_204_NO_CONTENT)
async def desconectar_instancia(
    instancia_id: int,
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
    factory: Callable[..., EvolutionClient] = Depends(get_evolution_factory),
):
    instancia = svc.get(instancia_id)
    async with factory(instancia) as client:
        try:
            await client.logout(instancia.instance_name)
        except EvolutionAPIError as e:
            raise _erro_gateway(e)
    svc.registrar_estado(instancia.instance_name, "close")


@router.post("/instancias/{instancia_id}/mensagens")
async def enviar_mensagem(
    instancia_id: int,
    payload: EnviarMensagemIn,
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
    factory: Callable[..., EvolutionClient] = Depends(get_evolution_factory),
):
    instancia = svc.get(instancia_id)
    async with factory(instancia) as client:
        try:
            return await client.send_text(instancia.instance_name, payload.numero, payload.texto)
        except EvolutionAPIError as e:
            raise _erro_gateway(e)


# ---------------- Pareamento (QR code) ----------------
def _instancia_configurada(svc: WhatsAppInstanciaService, instance_name: str):
    instancia = svc.get_por_nome(instance_name)
    if not instancia:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Instância não encontrada")
    return instancia


@router.post("/pareamento/{instance_name}", response_model=PareamentoOut)
async def iniciar_pareamento(
    instance_name: str,
    current_user: UserModel = Depends(get_current_user),
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
    factory: Callable[..., EvolutionClient] = Depends(get_evolution_factory),
    registry: PairingRegistry = Depends(get_pairing_registry),
):
    instancia = _instancia_configurada(svc, instance_name)
    sessao = await registry.start(current_user.empresa_id, instance_name, factory(instancia))
    if sessao.status == StatusPareamento.ERROR:
        await registry.cancel(current_user.empresa_id, instance_name)
        raise HTTPException(status.HTTP_502_BAD_GATEWAY, sessao.erro)
    return sessao.snapshot()


@router.get("/pareamento/{instance_name}", response_model=PareamentoOut)
async def status_pareamento(
    instance_name: str,
    current_user: UserModel = Depends(get_current_user),
    svc: WhatsAppInstanciaService = Depends(get_whatsapp_instancia_service),
    registry: PairingRegistry = Depends(get_pairing_registry),
):
    sessao = registry.get(current_user.empresa_id, instance_name)
    if sessao is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Nenhum pareamento em andamento")
    if sessao.status == StatusPareamento.CONNECTED:
        svc.registrar_estado(instance_name, "open")
    snapshot = sessao.snapshot()
    if not sessao.ativo:
        registry.descartar(current_user.empresa_id, instance_name)
    return snapshot


@router.delete("/pareamento/{instance_name}", status_code=status.HTTP_204_NO_CONTENT)
async def cancelar_pareamento(
    instance_name: str,
    current_user: UserModel = Depends(get_current_user),
    registry: PairingRegistry = Depends(get_pairing_registry),
):
    if not await registry.cancel(current_user.empresa_id, instance_name):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Nenhum pareamento em andamento")
