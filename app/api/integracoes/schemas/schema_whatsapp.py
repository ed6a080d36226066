from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WhatsAppInstanciaCreate(BaseModel):
    instance_name: str = Field(..., min_length=1, max_length=100)
    base_url: Optional[str] = Field(default=None, max_length=255)
    api_key: Optional[str] = None
    ativo: bool = False

    @field_validator("instance_name")
    @classmethod
    def _sem_espacos(cls, v: str) -> str:
        v = v.strip()
        if " " in v or "/" in v:
            raise ValueError("Nome da instância não pode conter espaços ou '/'")
        return v


class WhatsAppInstanciaUpdate(BaseModel):
    base_url: Optional[str] = Field(default=None, max_length=255)
    api_key: Optional[str] = None
    ativo: Optional[bool] = None


class WhatsAppInstanciaOut(BaseModel):
    id: int
    instance_name: str
    base_url: Optional[str] = None
    possui_api_key: bool = False
    ativo: bool
    last_state: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EstadoConexaoOut(BaseModel):
    instance_name: str
    state: Optional[str] = None


class EnviarMensagemIn(BaseModel):
    numero: str = Field(..., min_length=8)
    texto: str = Field(..., min_length=1, max_length=4096)


class PareamentoOut(BaseModel):
    instance_name: str
    status: str
    qr_base64: Optional[str] = None
    countdown: Optional[int] = None
    ultimo_estado: Optional[str] = None
    erro: Optional[str] = None


class InstanciaRemotaOut(BaseModel):
    instance_name: str
    status: str
    profile_name: Optional[str] = None
    profile_pic_url: Optional[str] = None
    owner_jid: Optional[str] = None


class InstanciasRemotasOut(BaseModel):
    instancias: List[InstanciaRemotaOut]
