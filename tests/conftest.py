import os
import tempfile

# Ambiente de teste: sqlite em memória, sem bootstrap no startup
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SKIP_DB_INIT"] = "true"
os.environ.setdefault("SECRET_KEY", "chave-de-teste")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="confeitaria-logs-"))
os.environ.setdefault("CHECKOUT_LINK_BASICO", "https://pagamento.exemplo.com/basico")
os.environ.setdefault("CHECKOUT_LINK_PROFISSIONAL", "https://pagamento.exemplo.com/profissional")

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.main import app
from app.database.db_connection import Base, SessionLocal, engine, get_db
from app.database.init_db import inicializar_banco
from app.core.admin_dependencies import get_current_user
from app.api.cadastros.models.user_model import UserModel
from app.api.empresas.services.empresa_service import EmpresaService

# usuário "autenticado" nas rotas admin
_usuario_atual = {"username": "admin"}


def _get_db_teste():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def _usuario_teste(db: Session = Depends(get_db)) -> UserModel:
    return db.query(UserModel).filter(UserModel.username == _usuario_atual["username"]).one()


@pytest.fixture(autouse=True)
def banco():
    """Banco limpo por teste, criado pelo mesmo bootstrap da aplicação (empresa demo + admin)."""
    Base.metadata.drop_all(bind=engine)
    inicializar_banco()
    _usuario_atual["username"] = "admin"
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def empresa_id(db) -> int:
    return db.query(UserModel).filter(UserModel.username == "admin").one().empresa_id


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = _get_db_teste
    app.dependency_overrides[get_current_user] = _usuario_teste
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def outra_empresa(db):
    """Segunda confeitaria com seu próprio usuário, para checar o isolamento entre empresas."""
    empresa = EmpresaService(db).criar("Doces da Outra")
    db.add(UserModel(empresa_id=empresa.id, username="outra", nome="Outra", hashed_password="x", type_user="admin"))
    db.commit()
    return empresa.id


@pytest.fixture
def como_usuario():
    def _trocar(username: str):
        _usuario_atual["username"] = username
    return _trocar
