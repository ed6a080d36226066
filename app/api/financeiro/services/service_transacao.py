from datetime import date
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.financeiro.models.model_financeiro import (
    CATEGORIAS_FINANCEIRAS_PADRAO,
    CategoriaFinanceiraModel,
    TransacaoModel,
)
from app.api.financeiro.repositories.repo_financeiro import CategoriaFinanceiraRepository, TransacaoRepository
from app.api.financeiro.schemas.schema_financeiro import (
    CategoriaFinanceiraIn,
    CategoriaFinanceiraUpdate,
    TransacaoCreate,
    TransacaoUpdate,
)
from app.api.financeiro.services.calculos_financeiros import eh_custo_variavel
from app.utils.database_utils import today_sp
from app.utils.decimal_utils import dec
from app.utils.logger import logger


class CategoriaFinanceiraService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.repo = CategoriaFinanceiraRepository(db, empresa_id)

    def garantir_padrao(self, commit: bool = True) -> None:
        if self.repo.list():
            return
        for nome, tipo in CATEGORIAS_FINANCEIRAS_PADRAO:
            self.repo.add(CategoriaFinanceiraModel(nome=nome, tipo=tipo))
        if commit:
            self.db.commit()
        logger.info(f"[Financeiro] Categorias padrão criadas - empresa_id={self.repo.empresa_id}")

    def list(self, tipo: Optional[str] = None):
        self.garantir_padrao()
        return self.repo.list(tipo)

    def get(self, categoria_id: int) -> CategoriaFinanceiraModel:
        categoria = self.repo.get(categoria_id)
        if not categoria:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Categoria não encontrada")
        return categoria

    def create(self, payload: CategoriaFinanceiraIn) -> CategoriaFinanceiraModel:
        if self.repo.get_by_nome(payload.nome):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Categoria já existe")
        categoria = self.repo.add(CategoriaFinanceiraModel(nome=payload.nome.strip(), tipo=payload.tipo.value))
        self.db.commit()
        return categoria

    def update(self, categoria_id: int, payload: CategoriaFinanceiraUpdate) -> CategoriaFinanceiraModel:
        categoria = self.get(categoria_id)
        data = payload.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        if "nome" in data:
            existente = self.repo.get_by_nome(data["nome"])
            if existente and existente.id != categoria.id:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "Categoria já existe")
        for key, value in data.items():
            setattr(categoria, key, value)
        self.db.commit()
        return categoria

    def delete(self, categoria_id: int) -> None:
        self.repo.delete(self.get(categoria_id))
        self.db.commit()


class TransacaoService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id
        self.repo = TransacaoRepository(db, empresa_id)
        self.categorias = CategoriaFinanceiraRepository(db, empresa_id)

    def get(self, transacao_id: int) -> TransacaoModel:
        transacao = self.repo.get(transacao_id)
        if not transacao:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Transação não encontrada")
        return transacao

    def list(self, tipo=None, data_inicio=None, data_fim=None, categoria_id=None, skip: int = 0, limit=None):
        return self.repo.list(tipo, data_inicio, data_fim, categoria_id, skip, limit)

    def _validar_categoria(self, categoria_id: Optional[int]) -> None:
        if categoria_id is not None and not self.categorias.get(categoria_id):
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Categoria não encontrada")

    def create(self, payload: TransacaoCreate) -> TransacaoModel:
        self._validar_categoria(payload.categoria_id)
        data = payload.model_dump(mode="json")
        data["data"] = payload.data
        transacao = self.repo.add(TransacaoModel(**data))
        self.db.commit()
        return transacao

    def update(self, transacao_id: int, payload: TransacaoUpdate) -> TransacaoModel:
        transacao = self.get(transacao_id)
        data = payload.model_dump(mode="json", exclude_unset=True)
        if "categoria_id" in data:
            self._validar_categoria(data["categoria_id"])
        if "data" in data:
            data["data"] = payload.data
        for key, value in data.items():
            setattr(transacao, key, value)
        self.db.commit()
        self.db.refresh(transacao)
        return transacao

    def delete(self, transacao_id: int) -> None:
        self.repo.delete(self.get(transacao_id))
        self.db.commit()

    def _categoria_por_nome(self, nome: str, tipo_transacao: str) -> CategoriaFinanceiraModel:
        # lançamento automático pode ser o primeiro acesso da empresa ao financeiro
        CategoriaFinanceiraService(self.db, self.empresa_id).garantir_padrao(commit=False)
        categoria = self.categorias.get_by_nome(nome)
        if categoria:
            return categoria
        if tipo_transacao == "Receita":
            tipo = "Receita"
        else:
            tipo = "DespesaVariavel" if eh_custo_variavel(nome) else "DespesaFixa"
        return self.categorias.add(CategoriaFinanceiraModel(nome=nome, tipo=tipo))

    def lancar(
        self,
        tipo: str,
        descricao: str,
        valor,
        data: Optional[date] = None,
        categoria_nome: Optional[str] = None,
        forma_pagamento: Optional[str] = None,
        pedido_id: Optional[int] = None,
        conta_id: Optional[int] = None,
        observacoes: Optional[str] = None,
    ) -> TransacaoModel:
        """
        Lançamento automático vindo de outros domínios (pagamentos, compras).
        Não faz commit: participa da transação de quem chamou.
        """
        categoria = self._categoria_por_nome(categoria_nome, tipo) if categoria_nome else None
        transacao = self.repo.add(
            TransacaoModel(
                tipo=tipo,
                descricao=descricao[:255],
                valor=dec(valor),
                data=data or today_sp(),
                categoria_id=categoria.id if categoria else None,
                forma_pagamento=forma_pagamento,
                pedido_id=pedido_id,
                conta_id=conta_id,
                observacoes=observacoes,
            )
        )
        logger.info(f"[Financeiro] {tipo} lançada: {descricao} R$ {dec(valor)}")
        return transacao
