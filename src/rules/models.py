from pydantic import BaseModel


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class InvoiceRules(BaseModel):
    listing_path: str = "/dashboard/invoices"


class SessionCookieRules(BaseModel):
    name: str = "access_token"
    secure: bool = False
    http_only: bool = True
    same_site: str = "lax"


class SessionsRules(BaseModel):
    ttl_minutes: int
    cookie: SessionCookieRules


class AuthRules(BaseModel):
    strategy: str = "credentials"
    post_login_path: str = "/dashboard"
    min_password_length: int = 6
    sessions: SessionsRules


class OpsRules(BaseModel):
    required_env: list[str] = []
    migrations_dir: str = "migrations"


class Rules(BaseModel):
    project: ProjectRules
    invoices: InvoiceRules
    auth: AuthRules
    ops: OpsRules
