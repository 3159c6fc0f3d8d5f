from datetime import date, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
InvoiceStatus = Literal["pending", "paid"]
UserStatus = Literal["active", "disabled"]

# --- Customers ---

class Customer(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    email: str
    image_url: str | None = None

# --- Invoices ---

class Invoice(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    customer_id: str
    amount: int = Field(gt=0)  # minor units (cents)
    status: InvoiceStatus
    date: date

# --- Users ---

class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    email: str
    password_hash: str
    status: UserStatus = "active"
    created_at: datetime = Field(default_factory=datetime.utcnow)
