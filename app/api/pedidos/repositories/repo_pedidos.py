from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from app.api.pedidos.models.model_pedido import (
    PedidoModel,
    PedidoHistoricoModel,
)
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.shared.schemas.schema_shared_enums import PedidoStatusEnum

STATUS_FECHADOS = [PedidoStatusEnum.ENTREGUE.value, PedidoStatusEnum.CANCELADO.value]


class PedidoRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(PedidoModel).filter(PedidoModel.empresa_id == self.empresa_id)

    # ------------- Queries -------------
    def get_cliente(self, cliente_id: int) -> Optional[ClienteModel]:
        return (
            self.db.query(ClienteModel)
            .filter(ClienteModel.empresa_id == self.empresa_id, ClienteModel.id == cliente_id)
            .first()
        )

    def get_pedido(self, pedido_id: int) -> Optional[PedidoModel]:
        return (
            self._query()
            .options(
                selectinload(PedidoModel.itens),
                selectinload(PedidoModel.historico),
                selectinload(PedidoModel.aderecos),
            )
            .filter(PedidoModel.id == pedido_id)
            .first()
        )

    def list_pedidos(
        self,
        status: Optional[str] = None,
        busca: Optional[str] = None,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
        excluir_status: Optional[list[str]] = None,
    ) -> list[PedidoModel]:
        """Filtro linear por status + busca (nome do cliente ou número do pedido)."""
        q = self._query().options(selectinload(PedidoModel.itens))
        if status:
            q = q.filter(PedidoModel.status == status)
        if excluir_status:
            q = q.filter(PedidoModel.status.notin_(excluir_status))
        if busca and busca.strip():
            termo = busca.strip()
            condicoes = [PedidoModel.cliente_nome.ilike(f"%{termo}%")]
            if termo.lstrip("#").isdigit():
                condicoes.append(PedidoModel.numero == int(termo.lstrip("#")))
            q = q.filter(or_(*condicoes))
        if data_inicio:
            q = q.filter(PedidoModel.data_entrega >= data_inicio)
        if data_fim:
            q = q.filter(PedidoModel.data_entrega <= data_fim)
        return q.order_by(PedidoModel.data_entrega, PedidoModel.hora_entrega, PedidoModel.numero).all()

    def proximo_numero(self) -> int:
        atual = (
            self.db.query(func.max(PedidoModel.numero))
            .filter(PedidoModel.empresa_id == self.empresa_id)
            .scalar()
        )
        return (atual or 0) + 1

    def contar(
        self,
        status: Optional[str] = None,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
        excluir_status: Optional[list[str]] = None,
    ) -> int:
        q = self.db.query(func.count(PedidoModel.id)).filter(PedidoModel.empresa_id == self.empresa_id)
        if status:
            q = q.filter(PedidoModel.status == status)
        if excluir_status:
            q = q.filter(PedidoModel.status.notin_(excluir_status))
        if data_inicio:
            q = q.filter(PedidoModel.data_entrega >= data_inicio)
        if data_fim:
            q = q.filter(PedidoModel.data_entrega <= data_fim)
        return q.scalar() or 0

    def soma_saldo_pendente(self) -> Decimal:
        total = (
            self.db.query(func.coalesce(func.sum(PedidoModel.saldo_pendente), 0))
            .filter(
                PedidoModel.empresa_id == self.empresa_id,
                PedidoModel.status != PedidoStatusEnum.CANCELADO.value,
                PedidoModel.saldo_pendente > 0,
            )
            .scalar()
        )
        return Decimal(str(total or 0))

    # ------------- Mutations -------------
    def add(self, pedido: PedidoModel) -> PedidoModel:
        pedido.empresa_id = self.empresa_id
        self.db.add(pedido)
        self.db.flush()
        return pedido

    def add_historico(
        self,
        pedido: PedidoModel,
        descricao: str,
        status_anterior: Optional[str] = None,
        status_novo: Optional[str] = None,
        usuario: Optional[str] = None,
    ) -> PedidoHistoricoModel:
        registro = PedidoHistoricoModel(
            descricao=descricao,
            status_anterior=status_anterior,
            status_novo=status_novo,
            usuario=usuario,
        )
        pedido.historico.append(registro)
        return registro

    def delete(self, pedido: PedidoModel) -> None:
        self.db.delete(pedido)
        self.db.flush()
