from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.estoque.models.model_adereco import AderecoModel, CompraAderecoModel
from app.api.estoque.repositories.repo_adereco import AderecoRepository
from app.api.estoque.schemas.schema_adereco import AderecoCreate, AderecoUpdate, CompraAderecoIn
from app.utils.database_utils import today_sp
from app.utils.decimal_utils import dec
from app.utils.logger import logger


class AderecoService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id
        self.repo = AderecoRepository(db, empresa_id)

    def get(self, adereco_id: int) -> AderecoModel:
        adereco = self.repo.get(adereco_id)
        if not adereco:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Adereço não encontrado")
        return adereco

    def list(self, categoria: Optional[str] = None, search: Optional[str] = None):
        return self.repo.list(categoria=categoria, search=search)

    def alertas(self):
        return self.repo.list_baixo_estoque()

    def create(self, payload: AderecoCreate) -> AderecoModel:
        adereco = self.repo.add(AderecoModel(**payload.model_dump(mode="json")))
        self.db.commit()
        self.db.refresh(adereco)
        return adereco

    def update(self, adereco_id: int, payload: AderecoUpdate) -> AderecoModel:
        adereco = self.get(adereco_id)
        for campo, valor in payload.model_dump(mode="json", exclude_unset=True).items():
            setattr(adereco, campo, valor)
        self.db.commit()
        self.db.refresh(adereco)
        return adereco

    def delete(self, adereco_id: int) -> None:
        self.repo.delete(self.get(adereco_id))
        self.db.commit()

    # ---------------- Compras ----------------
    def list_compras(self, adereco_id: Optional[int] = None):
        return self.repo.list_compras(adereco_id)

    def registrar_compra(self, payload: CompraAderecoIn) -> CompraAderecoModel:
        """Registra a compra, soma ao estoque do adereço e opcionalmente lança a despesa."""
        adereco = self.get(payload.adereco_id)
        valor_total = dec(dec(payload.valor_unitario) * payload.quantidade)
        compra = CompraAderecoModel(
            adereco_id=adereco.id,
            data=payload.data or today_sp(),
            quantidade=payload.quantidade,
            valor_unitario=dec(payload.valor_unitario),
            valor_total=valor_total,
            fornecedor_id=payload.fornecedor_id or adereco.fornecedor_id,
            observacoes=payload.observacoes,
        )
        self.repo.add(compra)
        adereco.estoque = (adereco.estoque or 0) + payload.quantidade

        if payload.lancar_despesa and valor_total > 0:
            from app.api.financeiro.services.service_transacao import TransacaoService

            TransacaoService(self.db, self.empresa_id).lancar(
                tipo="Despesa",
                descricao=f"Compra de adereço: {adereco.nome} (x{payload.quantidade})",
                valor=valor_total,
                data=compra.data,
                categoria_nome="Compras",
            )

        self.db.commit()
        self.db.refresh(compra)
        logger.info(f"[Aderecos] Compra - {adereco.nome} +{payload.quantidade} (estoque={adereco.estoque})")
        return compra
