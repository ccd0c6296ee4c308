import argparse
import asyncio
from typing import List, Optional


class Command:
    """
    Base class for maintenance commands run through ``scripts.py``.

    Subclasses declare their options in ``add_arguments`` and do the work in
    the async ``handle`` method, which receives the parsed options.
    """

    help = ""

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        pass

    def create_parser(self, prog: str) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=prog, description=self.help)
        self.add_arguments(parser)
        return parser

    async def handle(self, **options):
        raise NotImplementedError("Commands must implement handle()")

    def run(self, prog: str, argv: Optional[List[str]] = None) -> None:
        options = vars(self.create_parser(prog).parse_args(argv or []))
        asyncio.run(self.handle(**options))
