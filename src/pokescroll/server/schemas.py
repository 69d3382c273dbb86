"""
Pydantic schema definitions for the proxy service.
"""

from pydantic import BaseModel, ConfigDict

from pokescroll.models import ItemPayload


class PokemonOut(ItemPayload):
    """A single catalog item, in the shape the browser decodes.

    Items are checked strictly by the gateway before they get here.
    """

    model_config = ConfigDict(strict=False)


class HealthOut(BaseModel):
    status: str = "ok"
