"""
API request models.

Pydantic models for decoding registration submissions and OpenAPI schema
generation. Responses are plain-text outcome labels, so there is no
response model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import Gender, Person

# Column ranges of voters.id (BIGINT) and voters.age (INTEGER)
BIGINT_MAX = 2**63 - 1
INTEGER_MAX = 2**31 - 1


class RegisterRequest(BaseModel):
    """Request model for voter registration. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, description="Voter name")
    id: int = Field(..., le=BIGINT_MAX, description="Voter identifier")
    age: int = Field(..., ge=0, le=INTEGER_MAX, description="Age in years")
    gender: Gender | None = Field(default=None, description="FEMALE, MALE or OTHER")
    alive: bool = Field(..., description="Liveness flag")

    def to_person(self) -> Person:
        """Convert to the domain candidate record."""
        return Person(
            name=self.name,
            id=self.id,
            age=self.age,
            gender=self.gender,
            alive=self.alive,
        )

    @classmethod
    def request_body_schema(cls) -> dict[str, Any]:
        """
        JSON schema of the request body, self-contained for embedding in OpenAPI.

        Pydantic places nested enums under "$defs"; those references would not
        resolve once the schema is embedded, so they are inlined.
        """
        schema = cls.model_json_schema()
        defs = schema.pop("$defs", {})
        return _inline_refs(schema, defs)


def _inline_refs(node: Any, defs: dict[str, Any]) -> Any:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            return _inline_refs(defs[ref.rsplit("/", 1)[-1]], defs)
        return {key: _inline_refs(value, defs) for key, value in node.items()}
    if isinstance(node, list):
        return [_inline_refs(item, defs) for item in node]
    return node
