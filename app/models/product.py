from pydantic import BaseModel, Field
from typing import Optional


class Product(BaseModel):
    """A named stock record.

    On the wire the name travels as ``Name`` and the count as ``quantity``,
    in that order. ``name`` is accepted on input as well; unknown fields are
    ignored and values must already have the right JSON type.
    """

    name: str = Field(alias="Name")
    quantity: int

    class Config:
        populate_by_name = True
        strict = True


class ProductQuantityUpdate(Product):
    """Body of an update: the name selects the record, the quantity replaces its own."""


class ProductDeleteRequest(Product):
    """Body of a delete. Only ``Name`` is used; ``quantity`` may be left out and is ignored."""

    quantity: Optional[int] = None
