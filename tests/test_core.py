import logging
import warnings

import pytest
from sqlalchemy import Column, Integer
from sqlalchemy.exc import SADeprecationWarning
from sqlalchemy.orm import DeclarativeBase

from core.authentication.jwt.client import JWTAuthClient
from core.db.mixins import TimestampsMixin
from core.exceptions import UnauthorizedException


def test_timestamps_mixin_maps_without_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", SADeprecationWarning)

        class Base(DeclarativeBase):
            pass

        class Sample(Base, TimestampsMixin):
            __tablename__ = "muestras"
            id = Column(Integer, primary_key=True)

    assert {"created_at", "updated_at"} <= set(Sample.__table__.columns.keys())


def test_rejected_token_is_logged_lazily(caplog):
    jwt_client = JWTAuthClient(secret_key="otra-clave")

    with caplog.at_level(logging.INFO, logger="core.authentication.jwt.client"):
        with pytest.raises(UnauthorizedException) as exc:
            jwt_client.verify_token("no-es-un-token")

    assert exc.value.error_code == "TOKEN_INVALID"
    record = next(r for r in caplog.records if r.msg.startswith("Rejected token"))
    assert record.msg == "Rejected token: %s"
    assert record.args
