"""
Cathode Material Catalog
========================
Defines the static catalog of cathode materials and their work functions.
The catalog is immutable and looked up by chemical symbol.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
import logging

logger = logging.getLogger(__name__)


class UnknownMaterialError(KeyError):
    """Raised when a symbol is not present in the material catalog."""


@dataclass(frozen=True)
class Material:
    symbol: str
    name: str
    work_function: float  # eV
    color: str  # hex colour of the cathode in the scene

    @property
    def label(self) -> str:
        """Text used by the material selector, e.g. 'Sodio (Na) - 2.75 eV'."""
        return f"{self.name} ({self.symbol}) - {self.work_function:g} eV"


# Order matters: this is the order shown in the selector
MATERIALS: Dict[str, Material] = {
    m.symbol: m for m in (
        Material(symbol="Cs", name="Cesio", work_function=2.1, color="#FFD700"),
        Material(symbol="K", name="Potasio", work_function=2.3, color="#DDA0DD"),
        Material(symbol="Na", name="Sodio", work_function=2.75, color="#FFA500"),
        Material(symbol="Ca", name="Calcio", work_function=2.87, color="#32CD32"),
        Material(symbol="Zn", name="Zinc", work_function=4.33, color="#708090"),
        Material(symbol="Cu", name="Cobre", work_function=4.65, color="#B87333"),
        Material(symbol="Al", name="Aluminio", work_function=4.28, color="#C0C0C0"),
    )
}


def get_material(symbol: str) -> Material:
    """Look up a material by its chemical symbol."""
    try:
        return MATERIALS[symbol]
    except KeyError:
        logger.error(f"Unknown cathode material: '{symbol}'")
        raise UnknownMaterialError(symbol) from None
