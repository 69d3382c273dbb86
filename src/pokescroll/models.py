from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pokescroll.exceptions import DecodeError


class ItemPayload(BaseModel):
    """Wire shape of one catalog item.

    The proxy validates reshaped upstream documents against it and the
    browser decodes each page entry through it. ``image`` is the official
    artwork URL and may be ``None`` when the upstream has none. ``height``
    is in decimetres and ``weight`` in hectograms, as served upstream.
    """

    # No coercion: "4" is not a height and True is not a weight
    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1)
    image: str | None = None
    types: list[str]
    height: int
    weight: int


def decode_item_payload(data) -> ItemPayload:
    """Validate a decoded JSON object as an item.

    Raises:
        DecodeError: if the object does not have the item shape.
    """
    try:
        return ItemPayload.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'item'}: {err['msg']}" for err in e.errors()
        )
        raise DecodeError(f"Invalid catalog item ({problems})") from e


@dataclass(frozen=True)
class Item:
    """One catalog entry as served by ``GET /api/pokemons``."""

    name: str
    image: str
    types: tuple[str, ...]
    height: int
    weight: int

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        """Build an item from a decoded JSON object.

        Raises:
            DecodeError: if a field is missing or has the wrong type.
        """
        payload = decode_item_payload(data)
        return cls(
            name=payload.name,
            # Upstream artwork can be null; the view substitutes a placeholder
            image=payload.image or "",
            types=tuple(payload.types),
            height=payload.height,
            weight=payload.weight,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "image": self.image,
            "types": list(self.types),
            "height": self.height,
            "weight": self.weight,
        }
