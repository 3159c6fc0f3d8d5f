from pydantic import BaseModel, Field, field_validator


class InvoiceRules(BaseModel):
    list_path: str = "/dashboard/invoices"
    minor_unit_factor: int = Field(default=100, gt=0)

    @field_validator("list_path")
    @classmethod
    def _must_be_internal(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("list_path must be an absolute internal path")
        return v

class CookieRules(BaseModel):
    name: str = "access_token"
    secure: bool = False
    same_site: str = "lax"

class AuthRules(BaseModel):
    strategy: str = "credentials"
    redirect_to: str = "/dashboard"
    token_ttl_minutes: int = Field(default=60 * 24, gt=0)
    min_password_length: int = Field(default=6, ge=1)
    cookie: CookieRules = Field(default_factory=CookieRules)

class Rules(BaseModel):
    invoices: InvoiceRules = Field(default_factory=InvoiceRules)
    auth: AuthRules = Field(default_factory=AuthRules)
