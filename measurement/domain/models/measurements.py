from dataclasses import dataclass
from typing import Any

from .quantity import Mass, Volume


@dataclass(slots=True)
class Measurements:
    """
    Container describing a single item across measurement dimensions.

    Not all dimensions may be present: an item can carry a count, a mass,
    a volume, or any combination of them.
    """

    quantity: float = 0.0
    mass: Mass | None = None
    volume: Volume | None = None

    def is_zero(self) -> bool:
        return (
            self.quantity == 0
            and (self.mass is None or self.mass.is_zero())
            and (self.volume is None or self.volume.is_zero())
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; zero-valued fields are omitted."""
        result: dict[str, Any] = {}
        if self.quantity != 0:
            result["quantity"] = float(self.quantity)
        if self.mass is not None and not self.mass.is_zero():
            result["mass"] = self.mass.to_dict()
        if self.volume is not None and not self.volume.is_zero():
            result["volume"] = self.volume.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Measurements":
        mass = data.get("mass")
        volume = data.get("volume")
        return cls(
            quantity=float(data.get("quantity", 0.0)),
            mass=Mass.from_dict(mass) if mass else None,
            volume=Volume.from_dict(volume) if volume else None,
        )
