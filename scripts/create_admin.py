# scripts/create_admin.py
from sqlalchemy import select

from apps.api.user.models import Role, RoleName, User
from core.authentication.passwords import hash_password
from core.db.core import get_session
from core.utils.commands.command import Command
from core.utils.loader import load_models


class CreateAdminCommand(Command):
    help = "Create an ADMIN user, the first account of a fresh installation"

    def add_arguments(self, parser):
        parser.add_argument("--nombre", required=True)
        parser.add_argument("--correo", required=True)
        parser.add_argument("--password", required=True)

    async def handle(self, **options):
        load_models()
        correo = options["correo"].strip().lower()
        if len(options["password"]) < 6:
            raise SystemExit("The password needs at least 6 characters")

        async with get_session() as session:
            role = await session.scalar(select(Role).where(Role.nombre == RoleName.ADMIN.value))
            if not role:
                raise SystemExit("Role ADMIN missing, run `python scripts.py seed_catalogs` first")

            if await session.scalar(select(User.id).where(User.correo == correo)):
                raise SystemExit(f"A user with email {correo} already exists")

            user = User(
                nombre=options["nombre"],
                correo=correo,
                password=hash_password(options["password"]),
                rol_id=role.id,
            )
            session.add(user)
            await session.commit()
            print(f"Admin {correo} created with id {user.id}")
