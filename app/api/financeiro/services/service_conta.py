from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.repositories.repo_fornecedor import FornecedorRepository
from app.api.financeiro.models.model_conta import ContaModel, PagamentoContaModel
from app.api.financeiro.repositories.repo_financeiro import CategoriaFinanceiraRepository, ContaRepository
from app.api.financeiro.schemas.schema_conta import ContaCreate, ContaUpdate, PagamentoContaIn
from app.api.financeiro.services.calculos_financeiros import resumo_contas
from app.api.financeiro.services.service_transacao import TransacaoService
from app.utils.database_utils import today_sp
from app.utils.decimal_utils import dec, to_float
from app.utils.logger import logger


class ContaService:
    """Contas a pagar (`tipo="pagar"`) e a receber (`tipo="receber"`)."""

    def __init__(self, db: Session, empresa_id: int, tipo: str):
        self.db = db
        self.empresa_id = empresa_id
        self.tipo = tipo
        self.repo = ContaRepository(db, empresa_id, tipo)

    @property
    def _rotulo(self) -> str:
        return "Conta a pagar" if self.tipo == "pagar" else "Conta a receber"

    def get(self, conta_id: int) -> ContaModel:
        conta = self.repo.get(conta_id)
        if not conta:
            raise HTTPException(status.HTTP_404_NOT_FOUND, f"{self._rotulo} não encontrada")
        return conta

    def list(self, status_filtro: str | None = None, busca: str | None = None):
        contas = self.repo.list(busca)
        if status_filtro:
            contas = [c for c in contas if c.status == status_filtro]
        return contas

    def _resolver_contraparte(self, payload: ContaCreate) -> str:
        # fornecedor só em contas a pagar, cliente só em contas a receber
        if payload.fornecedor_id and self.tipo != "pagar":
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Conta a receber não aceita fornecedor")
        if payload.cliente_id and self.tipo != "receber":
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Conta a pagar não aceita cliente")
        if payload.fornecedor_id:
            fornecedor = FornecedorRepository(self.db, self.empresa_id).get(payload.fornecedor_id)
            if not fornecedor:
                raise HTTPException(status.HTTP_404_NOT_FOUND, "Fornecedor não encontrado")
            return payload.contraparte_nome or fornecedor.nome_fantasia or fornecedor.razao_social
        if payload.cliente_id:
            cliente = ClienteRepository(self.db, self.empresa_id).get_by_id(payload.cliente_id)
            if not cliente:
                raise HTTPException(status.HTTP_404_NOT_FOUND, "Cliente não encontrado")
            return payload.contraparte_nome or cliente.nome
        return payload.contraparte_nome.strip()

    def _validar_categoria(self, categoria_id) -> None:
        if categoria_id and not CategoriaFinanceiraRepository(self.db, self.empresa_id).get(categoria_id):
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Categoria não encontrada")

    def create(self, payload: ContaCreate) -> ContaModel:
        self._validar_categoria(payload.categoria_id)
        conta = ContaModel(
            fornecedor_id=payload.fornecedor_id or None,
            cliente_id=payload.cliente_id or None,
            contraparte_nome=self._resolver_contraparte(payload),
            descricao=payload.descricao,
            categoria_id=payload.categoria_id,
            valor_total=dec(payload.valor_total),
            data_vencimento=payload.data_vencimento,
            observacoes=payload.observacoes,
        )
        self.repo.add(conta)
        self.db.commit()
        return conta

    def update(self, conta_id: int, payload: ContaUpdate) -> ContaModel:
        conta = self.get(conta_id)
        data = payload.model_dump(exclude_unset=True)
        if "categoria_id" in data:
            self._validar_categoria(data["categoria_id"])
        if "valor_total" in data and data["valor_total"] is not None:
            novo_total = dec(data["valor_total"])
            if novo_total < conta.valor_pago:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "Valor total menor que o já pago")
            data["valor_total"] = novo_total
        for key, value in data.items():
            setattr(conta, key, value)
        self.db.commit()
        return conta

    def delete(self, conta_id: int) -> None:
        self.repo.delete(self.get(conta_id))
        self.db.commit()

    def registrar_pagamento(self, conta_id: int, payload: PagamentoContaIn) -> ContaModel:
        conta = self.get(conta_id)
        valor = dec(payload.valor)
        saldo = conta.saldo_restante
        if valor > saldo:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"Valor excede o saldo restante (R$ {to_float(saldo):.2f})",
            )
        data_pagamento = payload.data or today_sp()
        conta.pagamentos.append(
            PagamentoContaModel(
                data=data_pagamento,
                valor=valor,
                forma_pagamento=payload.forma_pagamento.value if payload.forma_pagamento else None,
                observacao=payload.observacao,
            )
        )
        self.db.flush()

        if payload.lancar_fluxo_caixa:
            TransacaoService(self.db, self.empresa_id).lancar(
                tipo="Despesa" if self.tipo == "pagar" else "Receita",
                descricao=f"{conta.descricao} - {conta.contraparte_nome}",
                valor=valor,
                data=data_pagamento,
                categoria_nome=conta.categoria_nome or ("Outras Receitas" if self.tipo == "receber" else None),
                forma_pagamento=payload.forma_pagamento.value if payload.forma_pagamento else None,
                conta_id=conta.id,
                observacoes=payload.observacao,
            )
        self.db.commit()
        logger.info(f"[Financeiro] Pagamento R$ {valor} em {self._rotulo.lower()} id={conta.id} -> {conta.status}")
        return conta

    def resumo(self) -> dict:
        return resumo_contas(self.repo.list(), today_sp())
