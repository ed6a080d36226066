"""Add producao/config_producao and integracoes/whatsapp_instancias tables

Revision ID: 20261012_add_producao_config_and_whatsapp_instancias
Revises: 
Create Date: 2026-10-12 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261012_add_producao_config_and_whatsapp_instancias"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Ensure schemas exist
    op.execute("CREATE SCHEMA IF NOT EXISTS producao")
    op.execute("CREATE SCHEMA IF NOT EXISTS integracoes")

    # producao.config_producao (uma linha por empresa)
    op.create_table(
        "config_producao",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "empresa_id", sa.Integer,
            sa.ForeignKey("cadastros.empresas.id", ondelete="CASCADE"),
            nullable=False, unique=True,
        ),
        sa.Column("recheio_por_camada", sa.JSON, nullable=False),
        sa.Column("antecedencia_minima", sa.Integer, nullable=False, server_default="2"),
        sa.Column("tempos_producao", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        schema="producao",
    )

    # integracoes.whatsapp_instancias
    op.create_table(
        "whatsapp_instancias",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "empresa_id", sa.Integer,
            sa.ForeignKey("cadastros.empresas.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("instance_name", sa.String(100), nullable=False),
        sa.Column("base_url", sa.String(255), nullable=True),
        sa.Column("api_key", sa.Text, nullable=True),
        sa.Column("ativo", sa.Boolean, nullable=False, server_default=sa.text("false"), index=True),
        sa.Column("last_state", sa.String(30), nullable=True),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.UniqueConstraint("empresa_id", "instance_name", name="uq_whatsapp_instancias_empresa_nome"),
        schema="integracoes",
    )


def downgrade() -> None:
    op.drop_table("whatsapp_instancias", schema="integracoes")
    op.drop_table("config_producao", schema="producao")
