"""Client domain entities."""

from datetime import datetime

from pydantic import BaseModel, Field

from dsvflow.core.entities.common import new_id, utc_now


class ClientDraft(BaseModel):
    """Caller-supplied client data."""

    name: str
    phone: str = ""
    email: str = ""
    company: str = ""


class Client(BaseModel):
    """A customer, with running order totals."""

    id: str = Field(default_factory=new_id)
    name: str
    phone: str = ""
    email: str = ""
    company: str = ""
    total_orders: int = 0
    total_value: float = 0.0
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


# Fields an update may never overwrite
CLIENT_IDENTITY_FIELDS = frozenset({"id", "created_at"})
