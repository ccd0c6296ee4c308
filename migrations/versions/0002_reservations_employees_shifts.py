"""Reservations, shifts and employee records

Revision ID: 0002_reservations_employees_shifts
Revises: 0001_initial_schema
Create Date: 2026-10-19 16:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0002_reservations_employees_shifts"
down_revision = "0001_initial_schema"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "turnos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("descripcion", sa.String(120), nullable=True),
        sa.Column("hora_inicio", sa.Time(), nullable=False),
        sa.Column("hora_fin", sa.Time(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_turnos"),
    )

    op.create_table(
        "empleados",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("usuario_id", sa.Integer(), nullable=False),
        sa.Column("turno_id", sa.Integer(), nullable=True),
        sa.Column("telefono", sa.String(30), nullable=True),
        sa.Column("direccion", sa.String(255), nullable=True),
        sa.Column("dpi", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["usuario_id"], ["usuarios.id"], name="fk_empleados_usuario_id_usuarios"
        ),
        sa.ForeignKeyConstraint(["turno_id"], ["turnos.id"], name="fk_empleados_turno_id_turnos"),
        sa.PrimaryKeyConstraint("id", name="pk_empleados"),
        sa.UniqueConstraint("usuario_id", name="uq_empleados_usuario_id"),
        sa.UniqueConstraint("dpi", name="uq_empleados_dpi"),
    )
    op.create_index("ix_empleados_turno_id", "empleados", ["turno_id"])

    op.create_table(
        "reservas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cliente_id", sa.Integer(), nullable=False),
        sa.Column("espacio_id", sa.Integer(), nullable=False),
        sa.Column("fecha_reserva", sa.DateTime(timezone=True), nullable=False),
        sa.Column("fecha_inicio", sa.DateTime(timezone=True), nullable=False),
        sa.Column("fecha_fin", sa.DateTime(timezone=True), nullable=False),
        sa.Column("estado", sa.String(12), nullable=False),
        sa.CheckConstraint(
            "estado IN ('ACTIVA', 'FINALIZADA', 'CANCELADA')",
            name="ck_reservas_estado_valido",
        ),
        sa.CheckConstraint("fecha_fin > fecha_inicio", name="ck_reservas_rango_valido"),
        sa.ForeignKeyConstraint(
            ["cliente_id"], ["clientes.id"], name="fk_reservas_cliente_id_clientes"
        ),
        sa.ForeignKeyConstraint(
            ["espacio_id"], ["espacios.id"], name="fk_reservas_espacio_id_espacios"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_reservas"),
    )
    op.create_index("ix_reservas_cliente_id", "reservas", ["cliente_id"])
    op.create_index("ix_reservas_espacio_estado", "reservas", ["espacio_id", "estado"])


def downgrade():
    op.drop_index("ix_reservas_espacio_estado", table_name="reservas")
    op.drop_index("ix_reservas_cliente_id", table_name="reservas")
    op.drop_table("reservas")
    op.drop_index("ix_empleados_turno_id", table_name="empleados")
    op.drop_table("empleados")
    op.drop_table("turnos")
