from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.types import TypeDecorator


class TZAwareDateTime(TypeDecorator):
    """
    DateTime column that always hands back timezone-aware UTC values.

    Backends without native timezone support (SQLite) return naive values;
    they are stored as UTC and tagged as UTC on the way out.
    """

    impl = sa.DateTime
    cache_ok = True

    def __init__(self, timezone: bool = True, **kwargs):
        super().__init__(timezone=timezone, **kwargs)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, datetime) and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
