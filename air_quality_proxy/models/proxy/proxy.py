import json
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Content-Type": "application/json",
}


class ProxyRequest(BaseModel):
    """Framework-neutral inbound request."""

    method: str = Field(..., description="HTTP method")
    query_params: Dict[str, str] = Field(default_factory=dict, description="Query string parameters")

    @field_validator("method")
    def normalize_method(cls, v):
        return v.upper()

    @field_validator("query_params", mode="before")
    def default_query_params(cls, v):
        # Serverless events carry null when there is no query string
        if not v:
            return {}
        # Values are forwarded as text; nulls count as missing
        return {str(key): str(value) for key, value in v.items() if value is not None}

    def param(self, name: str) -> Optional[str]:
        """Return a query parameter, treating empty strings as missing."""
        value = self.query_params.get(name)
        return value or None


class ProxyResponse(BaseModel):
    """Framework-neutral outbound response."""

    status_code: int = Field(..., description="HTTP status code")
    headers: Dict[str, str] = Field(default_factory=lambda: dict(CORS_HEADERS))
    body: Optional[Dict[str, Any]] = Field(None, description="JSON body; None for an empty body")

    @classmethod
    def build(cls, status_code: int, body: Optional[Mapping[str, Any]] = None) -> "ProxyResponse":
        return cls(status_code=status_code, body=dict(body) if body is not None else None)

    def render_body(self) -> str:
        """Serialize the body the way it goes over the wire."""
        if self.body is None:
            return ""
        return json.dumps(self.body, separators=(",", ":"), ensure_ascii=False)
