from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from core.response.models import CustomBaseModel


class ClientCreate(CustomBaseModel):
    nombre: str = Field(..., min_length=1, max_length=120)
    telefono: Optional[str] = Field(None, max_length=30)
    correo: Optional[EmailStr] = None
    nit: Optional[str] = Field(None, max_length=20)


class ClientUpdate(CustomBaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=120)
    telefono: Optional[str] = Field(None, max_length=30)
    correo: Optional[EmailStr] = None
    nit: Optional[str] = Field(None, max_length=20)


class ClientResponse(CustomBaseModel):
    id: int
    nombre: str
    telefono: Optional[str] = None
    correo: Optional[str] = None
    nit: Optional[str] = None
    created_at: Optional[datetime] = None


class ClientListResponse(CustomBaseModel):
    total: int
    clientes: List[ClientResponse]


class ClientEnvelope(CustomBaseModel):
    mensaje: Optional[str] = None
    cliente: ClientResponse
