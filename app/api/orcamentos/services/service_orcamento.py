from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.empresas.services.empresa_service import EmpresaService
from app.api.orcamentos.models.model_orcamento import OrcamentoModel, OrcamentoItemModel
from app.api.orcamentos.repositories.repo_orcamento import OrcamentoRepository
from app.api.orcamentos.schemas.schema_orcamento import OrcamentoCreate, OrcamentoUpdate
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.pedidos.services.service_pedido_helpers import calcular_subtotal, calcular_valor_total
from app.api.shared.schemas.schema_shared_enums import OrcamentoStatusEnum
from app.utils.decimal_utils import dec
from app.utils.logger import logger
from app.utils.telefone import normalizar_telefone

_CAMPOS_SIMPLES = (
    "cliente_nome", "cliente_telefone", "cliente_email", "data_validade",
    "tipo_entrega", "data_entrega", "hora_entrega", "distancia", "instrucoes_retirada",
    "decoracao_descricao", "decoracao_imagens", "decoracao_observacoes", "observacoes",
)
_CAMPOS_CLIENTE = ("cliente_nome", "cliente_telefone", "cliente_email")

# Orçamentos nestes status não podem ser aprovados de novo
STATUS_JA_APROVADOS = (OrcamentoStatusEnum.APROVADO.value, OrcamentoStatusEnum.CONVERTIDO.value)


class OrcamentoService:
    def __init__(self, db: Session, empresa_id: int, usuario: Optional[str] = None):
        self.db = db
        self.empresa_id = empresa_id
        self.usuario = usuario
        self.repo = OrcamentoRepository(db, empresa_id)

    def _itens(self, itens) -> List[OrcamentoItemModel]:
        modelos = []
        for item in itens:
            modelo = OrcamentoItemModel(**item.model_dump(mode="json"))
            modelo.subtotal = calcular_subtotal(modelo.quantidade, modelo.preco_unitario)
            modelos.append(modelo)
        return modelos

    def _recalcular(self, orcamento: OrcamentoModel) -> None:
        orcamento.valor_total = calcular_valor_total((i.subtotal for i in orcamento.itens), orcamento.taxa_entrega)

    def _aplicar_cliente(self, orcamento: OrcamentoModel, cliente_id: Optional[int], substituir=()) -> None:
        if cliente_id is None:
            return
        cliente = ClienteRepository(self.db, self.empresa_id).get_by_id(cliente_id)
        if not cliente:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Cliente não encontrado")
        orcamento.cliente_id = cliente.id
        for campo in _CAMPOS_CLIENTE:
            if campo in substituir or not getattr(orcamento, campo):
                setattr(orcamento, campo, getattr(cliente, campo.removeprefix("cliente_")))

    def _historico(self, orcamento: OrcamentoModel, acao: str) -> None:
        self.repo.add_historico(orcamento, acao, self.usuario)

    # ---------------- CRUD ----------------
    def get(self, orcamento_id: int) -> OrcamentoModel:
        orcamento = self.repo.get(orcamento_id)
        if not orcamento:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Orçamento não encontrado")
        return orcamento

    def list(self, status_filtro: Optional[str] = None, busca: Optional[str] = None):
        # filtra pelo status de leitura (Expirado é derivado da validade)
        return [
            o for o in self.repo.list(busca=busca)
            if status_filtro is None or o.status_atual == status_filtro
        ]

    def create(self, payload: OrcamentoCreate) -> OrcamentoModel:
        dados = payload.model_dump(mode="json", exclude={"itens", "cliente_id", "endereco", "termos"})
        orcamento = OrcamentoModel(**dados)
        orcamento.data_validade = payload.data_validade
        orcamento.data_entrega = payload.data_entrega
        orcamento.endereco = payload.endereco.model_dump() if payload.endereco else None
        orcamento.taxa_entrega = dec(payload.taxa_entrega)
        orcamento.termos = (
            payload.termos.model_dump() if payload.termos else EmpresaService(self.db).get_termos(self.empresa_id)
        )
        self._aplicar_cliente(orcamento, payload.cliente_id)
        if orcamento.cliente_telefone:
            orcamento.cliente_telefone = normalizar_telefone(orcamento.cliente_telefone)
        orcamento.itens = self._itens(payload.itens)
        orcamento.status = OrcamentoStatusEnum.PENDENTE.value
        orcamento.numero = self.repo.proximo_numero()
        self._recalcular(orcamento)
        self.repo.add(orcamento)
        self._historico(orcamento, "Orçamento criado")
        self.db.commit()
        logger.info(f"[Orcamentos] Orçamento #{orcamento.numero} criado - empresa_id={self.empresa_id}")
        return self.get(orcamento.id)

    def update(self, orcamento_id: int, payload: OrcamentoUpdate) -> OrcamentoModel:
        orcamento = self.get(orcamento_id)
        dados = payload.model_dump(mode="json", exclude_unset=True)
        for campo in _CAMPOS_SIMPLES:
            if campo in dados:
                setattr(orcamento, campo, dados[campo])
        # datas como objetos date (model_dump json as transforma em str)
        if "data_validade" in dados:
            orcamento.data_validade = payload.data_validade
        if "data_entrega" in dados:
            orcamento.data_entrega = payload.data_entrega
        if "endereco" in dados:
            orcamento.endereco = payload.endereco.model_dump() if payload.endereco else None
        if "termos" in dados and payload.termos is not None:
            orcamento.termos = payload.termos.model_dump()
        if "taxa_entrega" in dados and payload.taxa_entrega is not None:
            orcamento.taxa_entrega = dec(payload.taxa_entrega)
        if "cliente_id" in dados:
            substituir = ()
            if payload.cliente_id is not None and payload.cliente_id != orcamento.cliente_id:
                substituir = [c for c in _CAMPOS_CLIENTE if c not in dados]
            orcamento.cliente_id = None
            self._aplicar_cliente(orcamento, payload.cliente_id, substituir)
        if payload.itens is not None:
            orcamento.itens = self._itens(payload.itens)
        self._recalcular(orcamento)
        self._historico(orcamento, "Orçamento editado")
        self.db.commit()
        return self.get(orcamento.id)

    def delete(self, orcamento_id: int) -> None:
        self.repo.delete(self.get(orcamento_id))
        self.db.commit()

    # ---------------- Ações ----------------
    def _mudar_status(self, orcamento_id: int, novo: OrcamentoStatusEnum, acao: str) -> OrcamentoModel:
        orcamento = self.get(orcamento_id)
        if orcamento.status in STATUS_JA_APROVADOS:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Orçamento já está {orcamento.status}")
        orcamento.status = novo.value
        self._historico(orcamento, acao)
        self.db.commit()
        return self.get(orcamento.id)

    def enviar(self, orcamento_id: int) -> OrcamentoModel:
        return self._mudar_status(orcamento_id, OrcamentoStatusEnum.ENVIADO, "Orçamento enviado ao cliente")

    def recusar(self, orcamento_id: int) -> OrcamentoModel:
        return self._mudar_status(orcamento_id, OrcamentoStatusEnum.RECUSADO, "Orçamento recusado")

    def duplicar(self, orcamento_id: int) -> OrcamentoModel:
        origem = self.get(orcamento_id)
        copia = OrcamentoModel(
            cliente_id=origem.cliente_id,
            cliente_nome=origem.cliente_nome,
            cliente_telefone=origem.cliente_telefone,
            cliente_email=origem.cliente_email,
            data_validade=origem.data_validade,
            tipo_entrega=origem.tipo_entrega,
            data_entrega=origem.data_entrega,
            hora_entrega=origem.hora_entrega,
            endereco=dict(origem.endereco) if origem.endereco else None,
            taxa_entrega=origem.taxa_entrega,
            distancia=origem.distancia,
            instrucoes_retirada=origem.instrucoes_retirada,
            decoracao_descricao=origem.decoracao_descricao,
            decoracao_imagens=list(origem.decoracao_imagens or []),
            decoracao_observacoes=origem.decoracao_observacoes,
            observacoes=origem.observacoes,
            termos=dict(origem.termos) if origem.termos else None,
            status=OrcamentoStatusEnum.PENDENTE.value,
        )
        copia.itens = [
            OrcamentoItemModel(
                tipo=i.tipo, produto_id=i.produto_id, nome=i.nome, tamanho=i.tamanho,
                sabor_massa=i.sabor_massa, sabor_recheio=i.sabor_recheio,
                quantidade=i.quantidade, preco_unitario=i.preco_unitario, subtotal=i.subtotal,
            )
            for i in origem.itens
        ]
        copia.numero = self.repo.proximo_numero()
        self._recalcular(copia)
        self.repo.add(copia)
        self._historico(copia, f"Orçamento duplicado do #{origem.numero}")
        self._historico(origem, f"Duplicado como #{copia.numero}")
        self.db.commit()
        return self.get(copia.id)

    def aprovar(self, orcamento_id: int):
        """
        Aprova o orçamento e gera exatamente um pedido (status Pagamento Pendente).
        Retorna (orcamento, pedido).
        """
        orcamento = self.get(orcamento_id)
        if orcamento.status in STATUS_JA_APROVADOS or orcamento.pedido_id is not None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Orçamento já foi aprovado")

        pedido = PedidoService(self.db, self.empresa_id, self.usuario).criar_de_orcamento(orcamento)
        orcamento.status = OrcamentoStatusEnum.APROVADO.value
        orcamento.pedido_id = pedido.id
        self._historico(orcamento, f"Orçamento aprovado - pedido #{pedido.numero} gerado")
        self.db.commit()
        logger.info(f"[Orcamentos] Orçamento #{orcamento.numero} aprovado -> pedido #{pedido.numero}")
        return self.get(orcamento.id), pedido
