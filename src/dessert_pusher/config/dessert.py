"""Dessert — one entry of the production catalog."""

from pydantic import BaseModel, ConfigDict, Field


class Dessert(BaseModel):
    """A dessert the shop can produce.

    ``start_production_amount`` is the number of desserts that must have been
    sold before this one starts being produced.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Human label, e.g. 'cupcake'")
    image: str = Field(description="Asset identifier for the dessert picture (file name)")
    price: int = Field(ge=0, description="Revenue earned per dessert sold ($)")
    start_production_amount: int = Field(
        ge=0,
        description="Cumulative desserts sold at which this dessert becomes the current one "
                    "(inclusive).",
    )
