from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Country:
    name: str
    flag_png: str
    population: int = 0
    flag_alt: Optional[str] = None

    @classmethod
    def from_json(cls, item: Dict[str, Any]) -> "Country":
        """Build a Country from one REST Countries record.

        Expected shape: ``{name: {common}, flags: {png, alt?}, population}``.
        Raises ValueError when the record does not have that shape.
        """
        try:
            name = item.get("name") or {}
            flags = item.get("flags") or {}
            return cls(
                name=name.get("common", ""),
                flag_png=flags.get("png", ""),
                population=int(item.get("population") or 0),
                flag_alt=flags.get("alt") or None,
            )
        except (AttributeError, TypeError) as e:
            raise ValueError(f"Malformed country record: {item!r}") from e


@dataclass(frozen=True)
class ControllerState:
    countries: Tuple[Country, ...] = field(default_factory=tuple)
    loading: bool = False
    error: str = ""

