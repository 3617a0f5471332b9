"""Product Schemas — Pydantic models for the HTTP request/response shape.

Invariants:
    - ProductWrite only checks JSON types; business rules live in core/validate_product
    - Missing name / priceInCents decode to None so validation reports them per field
    - Wire names are camelCase (priceInCents); Python attributes are snake_case

Design Decisions:
    - Strict types: "250" or 2.5 for priceInCents is a shape error, not a coercion
    - extra="ignore": an "id" in the request body is silently dropped (ids come from storage)
    - ProductWrite accepts only the camelCase wire name; snake_case keys are ignored
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class ProductWrite(BaseModel):
    """Create/update body — {"name": str, "priceInCents": int}."""
    model_config = ConfigDict(extra="ignore")

    name: StrictStr | None = None
    price_in_cents: StrictInt | None = Field(None, alias="priceInCents")


class ProductRead(BaseModel):
    """Product response — {"id": int, "name": str, "priceInCents": int}."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    price_in_cents: int = Field(alias="priceInCents")
