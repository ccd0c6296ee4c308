import importlib.util
import inspect
import logging
from pathlib import Path
from typing import List, Type

from core.utils.commands.command import Command

logger = logging.getLogger(__name__)


class ScriptRunner:
    """
    Finds ``<commands_folder>/<name>.py`` and runs the Command it defines.

    Command files are loaded by path, so the folder needs no ``__init__.py``
    and may share its name with the ``scripts.py`` entry point.
    """

    def __init__(self, commands_folder: str = "scripts"):
        self.commands_folder = Path(commands_folder)

    def load(self, command_name: str) -> Type[Command]:
        path = self.commands_folder / f"{command_name}.py"
        if not path.is_file():
            available = sorted(p.stem for p in self.commands_folder.glob("*.py"))
            raise LookupError(
                f"Unknown command {command_name!r}, available: {', '.join(available)}"
            )
        spec = importlib.util.spec_from_file_location(f"commands.{command_name}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, Command) and obj is not Command and obj.__module__ == module.__name__:
                return obj
        raise LookupError(f"{path} defines no Command subclass")

    def run(self, command_name: str, argv: List[str]) -> None:
        command_cls = self.load(command_name)
        logger.info("Running command %s", command_name)
        command_cls().run(prog=f"scripts.py {command_name}", argv=argv)
