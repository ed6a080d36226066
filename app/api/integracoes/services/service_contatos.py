from sqlalchemy.orm import Session

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.integracoes.clients.google_contacts_client import GoogleContactsClient
from app.utils.logger import logger
from app.utils.telefone import normalizar_telefone


class ImportadorContatosGoogle:
    """
    Importa contatos do Google como clientes da empresa.

    Ignora contatos sem nome e os que já existem (email igual, sem diferenciar
    maiúsculas, ou mesmos dígitos de telefone).
    """

    def __init__(self, db: Session, empresa_id: int, client: GoogleContactsClient):
        self.db = db
        self.empresa_id = empresa_id
        self.client = client
        self.repo = ClienteRepository(db, empresa_id)

    def importar(self, page_size: int = 100) -> dict:
        existentes = self.repo.list_all()
        emails = {c.email.strip().lower() for c in existentes if c.email}
        telefones = {normalizar_telefone(c.telefone) for c in existentes if c.telefone}
        telefones.discard(None)

        importados = ignorados = total = 0
        for contato in self.client.iter_contacts(page_size):
            total += 1
            nome = (contato.get("nome") or "").strip()
            email = (contato.get("email") or "").strip().lower() or None
            telefone = normalizar_telefone(contato.get("telefone"))

            if not nome or (email and email in emails) or (telefone and telefone in telefones):
                ignorados += 1
                continue

            self.db.add(
                ClienteModel(
                    empresa_id=self.empresa_id,
                    nome=nome[:100],
                    email=email,
                    telefone=telefone,
                    foto=contato.get("foto"),
                    origem="google",
                )
            )
            # contatos repetidos dentro da própria agenda
            if email:
                emails.add(email)
            if telefone:
                telefones.add(telefone)
            importados += 1

        self.db.commit()
        logger.info(
            f"[Clientes] Importação Google - empresa_id={self.empresa_id} "
            f"importados={importados} ignorados={ignorados} total={total}"
        )
        return {"importados": importados, "ignorados": ignorados, "total": total}
