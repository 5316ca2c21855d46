"""Admin Schemas — request body for raw query execution."""

from pydantic import BaseModel


class QueryRequest(BaseModel):
    query: str | None = None
