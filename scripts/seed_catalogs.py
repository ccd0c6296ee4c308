# scripts/seed_catalogs.py
from decimal import Decimal

from sqlalchemy import select

from apps.api.payment_type.models import PaymentType
from apps.api.tariff.models import Tariff
from apps.api.user.models import Role, RoleName
from core.db.core import get_session
from core.utils.commands.command import Command
from core.utils.loader import load_models

ROLE_DESCRIPTIONS = {
    RoleName.ADMIN: "Administrador del sistema",
    RoleName.OPERATOR: "Operador de caseta",
    RoleName.CLIENT: "Cliente del parqueo",
}

PAYMENT_TYPES = ["Efectivo", "Tarjeta", "Transferencia"]


class SeedCatalogsCommand(Command):
    help = "Insert the roles and payment types the API expects, skipping existing rows"

    def add_arguments(self, parser):
        parser.add_argument(
            "--tarifa",
            type=Decimal,
            default=None,
            help="Also create a 'Tarifa general' tariff with this hourly price",
        )

    async def handle(self, **options):
        load_models()
        async with get_session() as session:
            existing_roles = set(await session.scalars(select(Role.nombre)))
            for role, description in ROLE_DESCRIPTIONS.items():
                if role.value not in existing_roles:
                    session.add(Role(nombre=role.value, descripcion=description))
                    print(f"Created role {role.value}")

            existing_types = set(await session.scalars(select(PaymentType.nombre)))
            for name in PAYMENT_TYPES:
                if name not in existing_types:
                    session.add(PaymentType(nombre=name))
                    print(f"Created payment type {name}")

            price = options.get("tarifa")
            if price is not None:
                if price <= 0:
                    raise SystemExit("--tarifa must be greater than zero")
                session.add(Tariff(descripcion="Tarifa general", precio_hora=price))
                print(f"Created tariff 'Tarifa general' at {price} per hour")

            await session.commit()
            print("Catalog seeding completed.")
