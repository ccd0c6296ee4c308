import importlib
import importlib.util
import logging
from pathlib import Path
from types import ModuleType
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)


def feature_names(search_path: Iterable[str]) -> List[str]:
    """
    Names of the feature directories found on a package ``__path__``.

    Entries that are not directories are ignored; editable installs add
    import hook markers to namespace package paths.
    """
    names = set()
    for path in search_path:
        root = Path(path)
        if not root.is_dir():
            continue
        names.update(
            entry.name
            for entry in root.iterdir()
            if entry.is_dir()
            and entry.name.isidentifier()
            and not entry.name.startswith("_")
        )
    return sorted(names)


def discover_modules(apps_dir: str, module_name: str) -> Iterator[ModuleType]:
    """
    Import ``<apps_dir>.api.<feature>.<module_name>`` for every feature package.

    Feature packages are plain directories (no ``__init__.py`` needed).
    Features without the requested module are skipped silently; an import
    error inside an existing module is not.
    """
    api_package = importlib.import_module(f"{apps_dir}.api")
    for feature in feature_names(api_package.__path__):
        dotted = f"{apps_dir}.api.{feature}.{module_name}"
        if importlib.util.find_spec(dotted) is None:
            continue
        logger.debug("Loading %s", dotted)
        yield importlib.import_module(dotted)


def load_models(apps_dir: str = "apps") -> list[ModuleType]:
    """Import every models module so the metadata knows all tables."""
    return list(discover_modules(apps_dir, "models"))
