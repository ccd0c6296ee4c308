"""Initial parking schema with role and payment type catalogs

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

ACTIVE_ONLY = sa.text("estado = 'ACTIVO'")


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade():
    roles = op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(50), nullable=False),
        sa.Column("descripcion", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_roles"),
        sa.UniqueConstraint("nombre", name="uq_roles_nombre"),
    )
    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(120), nullable=False),
        sa.Column("correo", sa.String(120), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("rol_id", sa.Integer(), nullable=False),
        sa.Column("activo", sa.Boolean(), nullable=False),
        sa.Column("fecha_creacion", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["rol_id"], ["roles.id"], name="fk_usuarios_rol_id_roles"),
        sa.PrimaryKeyConstraint("id", name="pk_usuarios"),
    )
    op.create_index("ix_usuarios_correo", "usuarios", ["correo"], unique=True)

    op.create_table(
        "historial_accesos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("usuario_id", sa.Integer(), nullable=False),
        sa.Column("accion", sa.String(100), nullable=False),
        sa.Column("fecha", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["usuario_id"], ["usuarios.id"], name="fk_historial_accesos_usuario_id_usuarios"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_historial_accesos"),
    )
    op.create_index("ix_historial_accesos_usuario_id", "historial_accesos", ["usuario_id"])
    op.create_index("ix_historial_accesos_fecha", "historial_accesos", ["fecha"])

    op.create_table(
        "clientes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(120), nullable=False),
        sa.Column("telefono", sa.String(30), nullable=True),
        sa.Column("correo", sa.String(120), nullable=True),
        sa.Column("nit", sa.String(20), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_clientes"),
    )
    op.create_table(
        "vehiculos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cliente_id", sa.Integer(), nullable=False),
        sa.Column("placa", sa.String(20), nullable=False),
        sa.Column("marca", sa.String(50), nullable=True),
        sa.Column("modelo", sa.String(50), nullable=True),
        sa.Column("color", sa.String(30), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["cliente_id"], ["clientes.id"], name="fk_vehiculos_cliente_id_clientes"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_vehiculos"),
    )
    op.create_index("ix_vehiculos_placa", "vehiculos", ["placa"], unique=True)

    op.create_table(
        "zonas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(80), nullable=False),
        sa.Column("descripcion", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_zonas"),
    )
    op.create_table(
        "espacios",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("zona_id", sa.Integer(), nullable=False),
        sa.Column("codigo", sa.String(20), nullable=False),
        sa.Column("disponible", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["zona_id"], ["zonas.id"], name="fk_espacios_zona_id_zonas"),
        sa.PrimaryKeyConstraint("id", name="pk_espacios"),
        sa.UniqueConstraint("codigo", name="uq_espacios_codigo"),
    )
    op.create_table(
        "tarifas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("descripcion", sa.String(120), nullable=False),
        sa.Column("precio_hora", sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint("precio_hora > 0", name="ck_tarifas_precio_hora_positivo"),
        sa.PrimaryKeyConstraint("id", name="pk_tarifas"),
    )
    payment_types = op.create_table(
        "tipos_pago",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_tipos_pago"),
        sa.UniqueConstraint("nombre", name="uq_tipos_pago_nombre"),
    )

    op.create_table(
        "tickets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("vehiculo_id", sa.Integer(), nullable=False),
        sa.Column("espacio_id", sa.Integer(), nullable=False),
        sa.Column("empleado_id", sa.Integer(), nullable=False),
        sa.Column("tarifa_id", sa.Integer(), nullable=False),
        sa.Column("hora_entrada", sa.DateTime(timezone=True), nullable=False),
        sa.Column("hora_salida", sa.DateTime(timezone=True), nullable=True),
        sa.Column("estado", sa.String(10), nullable=False),
        sa.CheckConstraint(
            "estado IN ('ACTIVO', 'CERRADO')", name="ck_tickets_estado_valido"
        ),
        sa.CheckConstraint(
            "(estado = 'ACTIVO' AND hora_salida IS NULL) "
            "OR (estado = 'CERRADO' AND hora_salida IS NOT NULL)",
            name="ck_tickets_salida_segun_estado",
        ),
        sa.ForeignKeyConstraint(
            ["vehiculo_id"], ["vehiculos.id"], name="fk_tickets_vehiculo_id_vehiculos"
        ),
        sa.ForeignKeyConstraint(
            ["espacio_id"], ["espacios.id"], name="fk_tickets_espacio_id_espacios"
        ),
        sa.ForeignKeyConstraint(
            ["empleado_id"], ["usuarios.id"], name="fk_tickets_empleado_id_usuarios"
        ),
        sa.ForeignKeyConstraint(
            ["tarifa_id"], ["tarifas.id"], name="fk_tickets_tarifa_id_tarifas"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_tickets"),
    )
    op.create_index("ix_tickets_vehiculo_id", "tickets", ["vehiculo_id"])
    op.create_index("ix_tickets_espacio_id", "tickets", ["espacio_id"])
    op.create_index(
        "uq_tickets_vehiculo_activo",
        "tickets",
        ["vehiculo_id"],
        unique=True,
        postgresql_where=ACTIVE_ONLY,
        sqlite_where=ACTIVE_ONLY,
    )
    op.create_index(
        "uq_tickets_espacio_activo",
        "tickets",
        ["espacio_id"],
        unique=True,
        postgresql_where=ACTIVE_ONLY,
        sqlite_where=ACTIVE_ONLY,
    )

    op.create_table(
        "pagos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ticket_id", sa.Integer(), nullable=False),
        sa.Column("tipo_pago_id", sa.Integer(), nullable=False),
        sa.Column("monto", sa.Numeric(10, 2), nullable=False),
        sa.Column("fecha_pago", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("monto > 0", name="ck_pagos_monto_positivo"),
        sa.ForeignKeyConstraint(["ticket_id"], ["tickets.id"], name="fk_pagos_ticket_id_tickets"),
        sa.ForeignKeyConstraint(
            ["tipo_pago_id"], ["tipos_pago.id"], name="fk_pagos_tipo_pago_id_tipos_pago"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_pagos"),
        sa.UniqueConstraint("ticket_id", name="uq_pagos_ticket_id"),
    )
    op.create_table(
        "multas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ticket_id", sa.Integer(), nullable=False),
        sa.Column("motivo", sa.String(255), nullable=False),
        sa.Column("monto", sa.Numeric(10, 2), nullable=False),
        sa.Column("fecha", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("monto > 0", name="ck_multas_monto_positivo"),
        sa.ForeignKeyConstraint(["ticket_id"], ["tickets.id"], name="fk_multas_ticket_id_tickets"),
        sa.PrimaryKeyConstraint("id", name="pk_multas"),
    )
    op.create_index("ix_multas_ticket_id", "multas", ["ticket_id"])

    # Catalogs the API relies on
    op.bulk_insert(
        roles,
        [
            {"nombre": "ADMIN", "descripcion": "Administrador del sistema"},
            {"nombre": "OPERADOR", "descripcion": "Operador de caseta"},
            {"nombre": "CLIENTE", "descripcion": "Cliente del parqueo"},
        ],
    )
    op.bulk_insert(
        payment_types,
        [{"nombre": "Efectivo"}, {"nombre": "Tarjeta"}, {"nombre": "Transferencia"}],
    )


def downgrade():
    op.drop_index("ix_multas_ticket_id", table_name="multas")
    op.drop_table("multas")
    op.drop_table("pagos")
    op.drop_index("uq_tickets_espacio_activo", table_name="tickets")
    op.drop_index("uq_tickets_vehiculo_activo", table_name="tickets")
    op.drop_index("ix_tickets_espacio_id", table_name="tickets")
    op.drop_index("ix_tickets_vehiculo_id", table_name="tickets")
    op.drop_table("tickets")
    op.drop_table("tipos_pago")
    op.drop_table("tarifas")
    op.drop_table("espacios")
    op.drop_table("zonas")
    op.drop_index("ix_vehiculos_placa", table_name="vehiculos")
    op.drop_table("vehiculos")
    op.drop_table("clientes")
    op.drop_index("ix_historial_accesos_fecha", table_name="historial_accesos")
    op.drop_index("ix_historial_accesos_usuario_id", table_name="historial_accesos")
    op.drop_table("historial_accesos")
    op.drop_index("ix_usuarios_correo", table_name="usuarios")
    op.drop_table("usuarios")
    op.drop_table("roles")
