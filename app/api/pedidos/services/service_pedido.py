from datetime import date
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.pedidos.models.model_pedido import PedidoModel, PedidoItemModel
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.api.pedidos.schemas.schema_pedido import (
    AderecoPedidoIn,
    PagamentoPedidoIn,
    PedidoCreate,
    PedidoUpdate,
)
from app.api.pedidos.services.service_pedido_helpers import (
    calcular_subtotal,
    dias_da_semana,
    inicio_semana,
    resumo_financeiro,
)
from app.api.shared.schemas.schema_shared_enums import PedidoStatusEnum
from app.utils.database_utils import today_sp
from app.utils.decimal_utils import dec, to_float
from app.utils.logger import logger
from app.utils.telefone import link_whatsapp, normalizar_telefone

_CAMPOS_SIMPLES = (
    "cliente_nome", "cliente_telefone", "cliente_email",
    "data_entrega", "hora_entrega", "tipo_entrega", "distancia", "instrucoes",
    "decoracao_descricao", "decoracao_imagens", "decoracao_observacoes", "observacoes",
    "forma_pagamento", "prioridade",
)
_CAMPOS_CLIENTE = ("cliente_nome", "cliente_telefone", "cliente_email")


class PedidoService:
    def __init__(self, db: Session, empresa_id: int, usuario: Optional[str] = None):
        self.db = db
        self.empresa_id = empresa_id
        self.usuario = usuario
        self.repo = PedidoRepository(db, empresa_id)

    # ---------------- Helpers ----------------
    def _itens_de_payload(self, itens) -> List[PedidoItemModel]:
        modelos = []
        for item in itens:
            dados = item.model_dump(mode="json") if hasattr(item, "model_dump") else dict(item)
            modelo = PedidoItemModel(**dados)
            modelo.subtotal = calcular_subtotal(modelo.quantidade, modelo.preco_unitario)
            modelos.append(modelo)
        return modelos

    def _recalcular(self, pedido: PedidoModel) -> None:
        for item in pedido.itens:
            item.subtotal = calcular_subtotal(item.quantidade, item.preco_unitario)
        total, saldo, status_pag = resumo_financeiro(
            (item.subtotal for item in pedido.itens),
            pedido.taxa_entrega,
            pedido.valor_pago,
        )
        pedido.valor_total = total
        pedido.saldo_pendente = saldo
        pedido.status_pagamento = status_pag

    def _aplicar_cliente(self, pedido: PedidoModel, cliente_id: Optional[int], substituir=()) -> None:
        """Copia nome/telefone/email do cliente quando o snapshot não foi informado.

        Campos em `substituir` são sempre sobrescritos pelos dados do cliente.
        """
        if cliente_id is None:
            return
        cliente = self.repo.get_cliente(cliente_id)
        if not cliente:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Cliente não encontrado")
        pedido.cliente_id = cliente.id
        for campo in _CAMPOS_CLIENTE:
            if campo in substituir or not getattr(pedido, campo):
                setattr(pedido, campo, getattr(cliente, campo.removeprefix("cliente_")))

    def _historico(self, pedido, descricao, status_anterior=None, status_novo=None):
        self.repo.add_historico(pedido, descricao, status_anterior, status_novo, self.usuario)

    # ---------------- CRUD ----------------
    def get(self, pedido_id: int) -> PedidoModel:
        pedido = self.repo.get_pedido(pedido_id)
        if not pedido:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Pedido não encontrado")
        return pedido

    def list(self, status_filtro=None, busca=None, data_inicio=None, data_fim=None):
        return self.repo.list_pedidos(status=status_filtro, busca=busca, data_inicio=data_inicio, data_fim=data_fim)

    def create(self, payload: PedidoCreate) -> PedidoModel:
        dados = payload.model_dump(mode="json", exclude={"itens", "cliente_id", "endereco", "data_entrega"})
        pedido = PedidoModel(**dados)
        pedido.data_entrega = payload.data_entrega
        pedido.endereco = payload.endereco.model_dump() if payload.endereco else None
        pedido.valor_pago = dec(payload.valor_pago)
        pedido.taxa_entrega = dec(payload.taxa_entrega)
        self._aplicar_cliente(pedido, payload.cliente_id)
        if pedido.cliente_telefone:
            pedido.cliente_telefone = normalizar_telefone(pedido.cliente_telefone)
        pedido.itens = self._itens_de_payload(payload.itens)
        pedido.numero = self.repo.proximo_numero()
        self._recalcular(pedido)
        self.repo.add(pedido)
        self._historico(pedido, "Pedido criado", status_novo=pedido.status)
        self.db.commit()
        logger.info(f"[Pedidos] Pedido #{pedido.numero} criado - empresa_id={self.empresa_id}")
        return self.get(pedido.id)

    def criar_de_orcamento(self, orcamento) -> PedidoModel:
        """Gera o pedido de um orçamento aprovado, copiando cliente, itens, entrega, decoração e total."""
        pedido = PedidoModel(
            orcamento_id=orcamento.id,
            cliente_id=orcamento.cliente_id,
            cliente_nome=orcamento.cliente_nome,
            cliente_telefone=orcamento.cliente_telefone,
            cliente_email=orcamento.cliente_email,
            data_entrega=orcamento.data_entrega or today_sp(),
            hora_entrega=orcamento.hora_entrega,
            tipo_entrega=orcamento.tipo_entrega,
            endereco=dict(orcamento.endereco) if orcamento.endereco else None,
            taxa_entrega=dec(orcamento.taxa_entrega),
            distancia=orcamento.distancia,
            instrucoes=orcamento.instrucoes_retirada,
            decoracao_descricao=orcamento.decoracao_descricao,
            decoracao_imagens=list(orcamento.decoracao_imagens or []),
            decoracao_observacoes=orcamento.decoracao_observacoes,
            observacoes=orcamento.observacoes,
            valor_pago=dec(0),
            status=PedidoStatusEnum.PAGAMENTO_PENDENTE.value,
            prioridade="Normal",
        )
        pedido.itens = [
            PedidoItemModel(
                tipo=item.tipo,
                produto_id=item.produto_id,
                nome=item.nome,
                tamanho=item.tamanho,
                sabor_massa=item.sabor_massa,
                sabor_recheio=item.sabor_recheio,
                quantidade=item.quantidade,
                preco_unitario=item.preco_unitario,
                subtotal=item.subtotal,
            )
            for item in orcamento.itens
        ]
        pedido.numero = self.repo.proximo_numero()
        self._recalcular(pedido)
        self.repo.add(pedido)
        self._historico(pedido, f"Pedido criado a partir do orçamento #{orcamento.numero}", status_novo=pedido.status)
        return pedido

    def update(self, pedido_id: int, payload: PedidoUpdate) -> PedidoModel:
        pedido = self.get(pedido_id)
        dados = payload.model_dump(mode="json", exclude_unset=True)
        status_anterior = pedido.status

        for campo in _CAMPOS_SIMPLES:
            if campo in dados:
                setattr(pedido, campo, dados[campo])
        if "data_entrega" in dados and payload.data_entrega:
            pedido.data_entrega = payload.data_entrega
        if "endereco" in dados:
            pedido.endereco = payload.endereco.model_dump() if payload.endereco else None
        if "taxa_entrega" in dados and payload.taxa_entrega is not None:
            pedido.taxa_entrega = dec(payload.taxa_entrega)
        if "valor_pago" in dados and payload.valor_pago is not None:
            pedido.valor_pago = dec(payload.valor_pago)
        if "cliente_id" in dados:
            substituir = ()
            if payload.cliente_id is not None and payload.cliente_id != pedido.cliente_id:
                # troca de cliente: snapshot não enviado no payload vem do novo cliente
                substituir = [c for c in _CAMPOS_CLIENTE if c not in dados]
            pedido.cliente_id = None
            self._aplicar_cliente(pedido, payload.cliente_id, substituir)
        if payload.itens is not None:
            pedido.itens = self._itens_de_payload(payload.itens)

        self._recalcular(pedido)
        self._historico(pedido, "Pedido editado")
        if payload.status is not None and payload.status.value != status_anterior:
            pedido.status = payload.status.value
            self._historico(
                pedido,
                f"Status alterado de {status_anterior} para {pedido.status}",
                status_anterior,
                pedido.status,
            )
        self.db.commit()
        return self.get(pedido.id)

    def delete(self, pedido_id: int) -> None:
        pedido = self.get(pedido_id)
        self.repo.delete(pedido)
        self.db.commit()
        logger.info(f"[Pedidos] Pedido #{pedido.numero} removido")

    # ---------------- Ações ----------------
    def alterar_status(self, pedido_id: int, novo_status: PedidoStatusEnum) -> PedidoModel:
        pedido = self.get(pedido_id)
        anterior = pedido.status
        if anterior == novo_status.value:
            return pedido
        pedido.status = novo_status.value
        self._historico(pedido, f"Status alterado de {anterior} para {pedido.status}", anterior, pedido.status)
        self.db.commit()
        logger.info(f"[Pedidos] Status #{pedido.numero}: {anterior} -> {pedido.status}")
        return self.get(pedido.id)

    def registrar_pagamento(self, pedido_id: int, payload: PagamentoPedidoIn) -> PedidoModel:
        pedido = self.get(pedido_id)
        valor = dec(payload.valor)
        if valor > dec(pedido.saldo_pendente):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"Valor do pagamento maior que o saldo pendente (R$ {to_float(pedido.saldo_pendente):.2f})",
            )
        pedido.valor_pago = dec(dec(pedido.valor_pago) + valor)
        pedido.forma_pagamento = payload.forma_pagamento.value
        self._recalcular(pedido)
        self._historico(pedido, f"Pagamento de R$ {to_float(valor):.2f} registrado ({payload.forma_pagamento.value})")

        if payload.lancar_fluxo_caixa:
            from app.api.financeiro.services.service_transacao import TransacaoService

            TransacaoService(self.db, self.empresa_id).lancar(
                tipo="Receita",
                descricao=f"Pedido #{pedido.numero} - {pedido.cliente_nome}",
                valor=valor,
                data=payload.data or today_sp(),
                categoria_nome="Vendas",
                forma_pagamento=payload.forma_pagamento.value,
                pedido_id=pedido.id,
                observacoes=payload.observacao,
            )
        self.db.commit()
        return self.get(pedido.id)

    def adicionar_adereco(self, pedido_id: int, payload: AderecoPedidoIn) -> PedidoModel:
        from app.api.estoque.models.model_adereco import AderecoModel, AderecoPedidoModel

        pedido = self.get(pedido_id)
        adereco = (
            self.db.query(AderecoModel)
            .filter(AderecoModel.empresa_id == self.empresa_id, AderecoModel.id == payload.adereco_id)
            .first()
        )
        if not adereco:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Adereço não encontrado")
        pedido.aderecos.append(AderecoPedidoModel(
            adereco_id=adereco.id,
            quantidade=payload.quantidade,
            reservado=payload.reservado,
            observacoes=payload.observacoes,
        ))
        self._historico(pedido, f"Adereço adicionado: {adereco.nome} (x{payload.quantidade})")
        self.db.commit()
        return self.get(pedido.id)

    def remover_adereco(self, pedido_id: int, adereco_pedido_id: int) -> PedidoModel:
        pedido = self.get(pedido_id)
        vinculo = next((a for a in pedido.aderecos if a.id == adereco_pedido_id), None)
        if not vinculo:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Adereço não vinculado a este pedido")
        pedido.aderecos.remove(vinculo)
        self._historico(pedido, f"Adereço removido: {vinculo.adereco_nome}")
        self.db.commit()
        return self.get(pedido.id)

    # ---------------- Visualizações ----------------
    def kanban(self, busca: Optional[str] = None, data_inicio=None, data_fim=None) -> dict:
        pedidos = self.repo.list_pedidos(busca=busca, data_inicio=data_inicio, data_fim=data_fim)
        colunas = []
        for st in PedidoStatusEnum:
            do_status = [p for p in pedidos if p.status == st.value]
            colunas.append({"status": st, "total": len(do_status), "pedidos": do_status})
        return {"colunas": colunas}

    def calendario(self, inicio: date, fim: date, status_filtro=None, busca=None) -> dict:
        if fim < inicio:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Data final anterior à data inicial")
        pedidos = self.repo.list_pedidos(status=status_filtro, busca=busca, data_inicio=inicio, data_fim=fim)
        por_dia: dict[date, list] = {}
        for p in pedidos:
            por_dia.setdefault(p.data_entrega, []).append(p)
        dias = [{"data": d, "pedidos": por_dia[d]} for d in sorted(por_dia)]
        return {"inicio": inicio, "fim": fim, "dias": dias}

    def semana(self, referencia: Optional[date] = None, status_filtro=None, busca=None) -> dict:
        """Grade de 7 dias a partir da segunda-feira da semana de referência (dias vazios incluídos)."""
        dias = dias_da_semana(referencia or today_sp())
        pedidos = self.repo.list_pedidos(status=status_filtro, busca=busca, data_inicio=dias[0], data_fim=dias[-1])
        return {
            "inicio": dias[0],
            "fim": dias[-1],
            "dias": [{"data": d, "pedidos": [p for p in pedidos if p.data_entrega == d]} for d in dias],
        }

    def dashboard(self) -> dict:
        hoje = today_sp()
        segunda = inicio_semana(hoje)
        domingo = dias_da_semana(hoje)[-1]
        cancelado = [PedidoStatusEnum.CANCELADO.value]
        return {
            "entregas_hoje": self.repo.contar(data_inicio=hoje, data_fim=hoje, excluir_status=cancelado),
            "pedidos_semana": self.repo.contar(data_inicio=segunda, data_fim=domingo, excluir_status=cancelado),
            "em_producao": self.repo.contar(status=PedidoStatusEnum.EM_PRODUCAO.value),
            "pagamento_pendente": self.repo.contar(status=PedidoStatusEnum.PAGAMENTO_PENDENTE.value),
            "saldo_pendente_total": to_float(self.repo.soma_saldo_pendente()),
        }

    def whatsapp_link(self, pedido_id: int, mensagem: Optional[str] = None) -> dict:
        pedido = self.get(pedido_id)
        telefone = normalizar_telefone(pedido.cliente_telefone or "")
        if not telefone:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Pedido sem telefone do cliente")
        if mensagem is None:
            mensagem = (
                f"Olá {pedido.cliente_nome}! Sobre seu pedido #{pedido.numero} "
                f"para {pedido.data_entrega.strftime('%d/%m/%Y')}: status {pedido.status}."
            )
            if dec(pedido.saldo_pendente) > 0:
                mensagem += f" Saldo pendente: R$ {to_float(pedido.saldo_pendente):.2f}."
        return {"telefone": telefone, "url": link_whatsapp(telefone, mensagem)}
