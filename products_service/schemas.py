# products_service/schemas.py
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer


def _json_number(value):
    # lax mode would take true / "10" as prices
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError("Input should be a number")
    if isinstance(value, float):
        return Decimal(str(value))
    return value


# Same precision as the products.price column: Numeric(10, 2)
Price = Annotated[
    Decimal,
    BeforeValidator(_json_number),
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


# 🛍️ Product
class ProductIn(BaseModel):
    """Request body for create and update. Unknown keys (including `id`) are ignored."""

    name: str = Field(..., min_length=1, max_length=255)
    price: Price


class ProductOut(ProductIn):
    id: int

    class Config:
        from_attributes = True


# ⚠️ Validation errors (body of every 400 response)
class Violation(BaseModel):
    property_path: str
    message: str
    code: str


def violations_from_errors(errors: List[dict]) -> List[Violation]:
    """Flatten pydantic/FastAPI error dicts into violations.

    The leading location segment ("body", "path", "query") is dropped unless it
    is the only one, e.g. a missing request body. Unparseable JSON is reported
    against the whole body rather than the byte offset.
    """
    violations = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if err.get("type") == "json_invalid":
            path = ["body"]
        else:
            path = loc[1:] if len(loc) > 1 else loc
        violations.append(
            Violation(
                property_path=".".join(path),
                message=err.get("msg", ""),
                code=err.get("type", "value_error"),
            )
        )
    return violations
