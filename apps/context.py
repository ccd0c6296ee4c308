# apps/context.py
import logging
from contextvars import ContextVar

current_user_id_ctx: ContextVar[int | None] = ContextVar(
    "current_user_id", default=None
)


def set_current_user_id(user_id: int):
    current_user_id_ctx.set(user_id)


def get_current_user_id() -> int | None:
    return current_user_id_ctx.get()


class CurrentUserLogFilter(logging.Filter):
    """Stamps every log record with the id of the authenticated caller."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.user_id = get_current_user_id() or "-"
        return True
