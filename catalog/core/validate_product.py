"""Product Validation — pure constraint checks run before any persistence call.

Invariants:
    - validate_product is PURE: collects every violation, never raises, never fails fast
    - At most one violation per field
    - MAX_NAME_LENGTH (100) is single source of truth for the name column width
    - Prices above MAX_STORED_INT are rejected: they cannot fit the price column
    - build_product only returns a Product that satisfies every constraint

Design Decisions:
    - Violations returned as a list of FieldViolation: the boundary renders them
      as a field -> message mapping without knowing the rules
    - Name length measured after trimming: the trimmed name is what gets stored
"""

from dataclasses import dataclass

from catalog.core.domain_types import (
    MAX_STORED_INT, PriceInCents, ProductField, ViolationTag,
)
from catalog.core.errors import ProductValidationError
from catalog.core.product import Product
from catalog.core.result import Failure, Result, Success


MAX_NAME_LENGTH: int = 100

VIOLATION_MESSAGES: dict[ViolationTag, str] = {
    ViolationTag.NAME_BLANK: "Product name must not be blank",
    ViolationTag.NAME_TOO_LONG: (
        f"Product name must be at most {MAX_NAME_LENGTH} characters"
    ),
    ViolationTag.PRICE_NOT_POSITIVE: "Price must be greater than zero",
    ViolationTag.PRICE_TOO_LARGE: f"Price must be at most {MAX_STORED_INT}",
}


@dataclass(frozen=True)
class FieldViolation:
    field: str
    tag: ViolationTag
    message: str

    @classmethod
    def of(cls, product_field: ProductField, tag: ViolationTag) -> "FieldViolation":
        return cls(product_field.value, tag, VIOLATION_MESSAGES[tag])


def validate_product(
    name: str | None, price_in_cents: int | None,
) -> list[FieldViolation]:
    """Check name and price constraints. Pure — returns every violation found."""
    violations: list[FieldViolation] = []

    trimmed = name.strip() if name is not None else ""
    if not trimmed:
        violations.append(
            FieldViolation.of(ProductField.NAME, ViolationTag.NAME_BLANK),
        )
    elif len(trimmed) > MAX_NAME_LENGTH:
        violations.append(
            FieldViolation.of(ProductField.NAME, ViolationTag.NAME_TOO_LONG),
        )

    if price_in_cents is None or price_in_cents <= 0:
        violations.append(
            FieldViolation.of(
                ProductField.PRICE_IN_CENTS, ViolationTag.PRICE_NOT_POSITIVE,
            ),
        )
    elif price_in_cents > MAX_STORED_INT:
        violations.append(
            FieldViolation.of(
                ProductField.PRICE_IN_CENTS, ViolationTag.PRICE_TOO_LARGE,
            ),
        )

    return violations


def build_product(
    name: str | None, price_in_cents: int | None,
) -> Result[Product]:
    """Validate caller-supplied fields and build an unsaved Product."""
    violations = validate_product(name, price_in_cents)
    if violations:
        return Failure(ProductValidationError(violations))
    return Success(Product(name=name.strip(), price_in_cents=PriceInCents(price_in_cents)))
