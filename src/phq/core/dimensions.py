# phq.core.dimensions

from __future__ import annotations
from typing import Iterable, Union, Tuple, TypeAlias, Any

from phq.core.utils import snake_case

DimTuple: TypeAlias = Tuple[int, int, int, int, int, int, int]
DimLike = Union["Dimensions", DimTuple, Iterable[int]]

# Order of the base dimensions inside the tuple.
BASE_LABELS: Tuple[str, ...] = (
    "Time",
    "Length",
    "Mass",
    "Electric Current",
    "Temperature",
    "Substance Amount",
    "Luminous Intensity",
)
BASE_SYMBOLS: Tuple[str, ...] = ("T", "L", "M", "I", "Θ", "N", "J")

# --- Core object -------------------------------------------------------------

class Dimensions(tuple):
    """
    Immutable 7-length vector of integer exponents for the SI base dimensions,
    ordered (T, L, M, I, Θ, N, J).

    Tuple subclass => hashable, compared by value, usable as dict keys.
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0, 0, 0, 0, 0, 0, 0)) -> "Dimensions":
        if isinstance(data, Dimensions):
            return data

        t = tuple(data)
        if len(t) != 7:
            raise ValueError("Dimensions must have length 7 (T, L, M, I, Θ, N, J).")
        for x in t:
            if isinstance(x, bool) or not isinstance(x, int):
                raise TypeError(f"Dimension exponents must be integers, got {x!r}")
        return tuple.__new__(cls, t)

    @classmethod
    def of(
        cls,
        *,
        time: int = 0,
        length: int = 0,
        mass: int = 0,
        electric_current: int = 0,
        temperature: int = 0,
        substance_amount: int = 0,
        luminous_intensity: int = 0,
    ) -> "Dimensions":
        """Build a signature from keyword exponents; omitted ones are zero."""
        return cls((time, length, mass, electric_current, temperature,
                    substance_amount, luminous_intensity))

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "Dimensions":  # type: ignore[override]
        o = Dimensions(other)
        return Dimensions(x + y for x, y in zip(self, o, strict=True))

    def __truediv__(self, other: DimLike) -> "Dimensions":
        o = Dimensions(other)
        return Dimensions(x - y for x, y in zip(self, o, strict=True))

    def __rtruediv__(self, other: DimLike) -> "Dimensions":
        return Dimensions(other) / self

    def __pow__(self, n: int, modulo: Any | None = None) -> "Dimensions":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimensions.")
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be an int, got {type(n).__name__}")
        return Dimensions(e * n for e in self)

    def __rmul__(self, other: Any) -> "Dimensions":
        """Prevent (int * Dimensions) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "Dimensions":
        """Block tuple concatenation (e.g., LENGTH + MASS)."""
        return NotImplemented

    def __radd__(self, other: Any) -> "Dimensions":
        return NotImplemented

    # --- Accessors ---
    @property
    def time(self) -> int:
        return self[0]

    @property
    def length(self) -> int:
        return self[1]

    @property
    def mass(self) -> int:
        return self[2]

    @property
    def electric_current(self) -> int:
        return self[3]

    @property
    def temperature(self) -> int:
        return self[4]

    @property
    def substance_amount(self) -> int:
        return self[5]

    @property
    def luminous_intensity(self) -> int:
        return self[6]

    @property
    def is_dimensionless(self) -> bool:
        return all(x == 0 for x in self)

    def as_tuple(self) -> DimTuple:
        return tuple(self)  # type: ignore[return-value]

    # --- Text forms ---
    def _nonzero(self) -> list[tuple[int, int]]:
        return [(i, v) for i, v in enumerate(self) if v != 0]

    def print(self) -> str:
        """Readable form, e.g. ``"T^(-2)·L^2·M"``; ``"1"`` when dimensionless."""
        parts = []
        for i, v in self._nonzero():
            sym = BASE_SYMBOLS[i]
            if v == 1:
                parts.append(sym)
            elif v > 0:
                parts.append(f"{sym}^{v}")
            else:
                parts.append(f"{sym}^({v})")
        return "·".join(parts) if parts else "1"

    def json(self) -> str:
        body = ",".join(f'"{snake_case(BASE_LABELS[i])}":{v}' for i, v in self._nonzero())
        return "{" + body + "}"

    def xml(self) -> str:
        out = ""
        for i, v in self._nonzero():
            tag = snake_case(BASE_LABELS[i])
            out += f"<{tag}>{v}</{tag}>"
        return out

    def yaml(self) -> str:
        body = ",".join(f"{snake_case(BASE_LABELS[i])}:{v}" for i, v in self._nonzero())
        return "{" + body + "}"

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        return f"Dimensions({self.print()})"

# --- Public constants --------------------------------------------------------

DIMENSIONLESS      = Dimensions((0, 0, 0, 0, 0, 0, 0))
TIME               = Dimensions((1, 0, 0, 0, 0, 0, 0))
LENGTH             = Dimensions((0, 1, 0, 0, 0, 0, 0))
MASS               = Dimensions((0, 0, 1, 0, 0, 0, 0))
ELECTRIC_CURRENT   = Dimensions((0, 0, 0, 1, 0, 0, 0))
TEMPERATURE        = Dimensions((0, 0, 0, 0, 1, 0, 0))
SUBSTANCE_AMOUNT   = Dimensions((0, 0, 0, 0, 0, 1, 0))
LUMINOUS_INTENSITY = Dimensions((0, 0, 0, 0, 0, 0, 1))


__all__ = [
    "Dimensions",
    "DimLike",
    "BASE_LABELS",
    "BASE_SYMBOLS",
    "DIMENSIONLESS",
    "TIME",
    "LENGTH",
    "MASS",
    "ELECTRIC_CURRENT",
    "TEMPERATURE",
    "SUBSTANCE_AMOUNT",
    "LUMINOUS_INTENSITY",
]
