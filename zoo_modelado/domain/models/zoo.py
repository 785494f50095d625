import logging
from dataclasses import dataclass, field
from typing import Optional

from zoo_modelado.domain.services.field_validator import require_optional_text, require_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Zoo:
    """Representa un zoológico.

    Dos zoológicos son iguales si coinciden su nombre y su ubicación.
    """

    name: str = field(
        metadata={"description": "Nombre del zoológico, no puede estar vacío"}
    )
    location: Optional[str] = field(
        default=None,
        metadata={"description": "Ubicación del zoológico (opcional)"}
    )

    def __post_init__(self):
        require_text(self.name, "name")
        require_optional_text(self.location, "location")

    def __hash__(self) -> int:
        return hash((self.name, self.location))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Zoo):
            return False
        return (self.name == other.name and
                self.location == other.location)

    class Builder:
        """Construye un Zoo paso a paso; la validación ocurre en build()."""

        def __init__(self, name: str):
            self._name = name
            self._location: Optional[str] = None

        def location(self, location: Optional[str]) -> 'Zoo.Builder':
            self._location = location
            return self

        def build(self) -> 'Zoo':
            """Valida los campos acumulados y crea el zoológico.

            Returns:
                Instancia inmutable de Zoo

            Raises:
                InvalidArgumentError: Si el nombre es None o está vacío, o si
                    la ubicación no es una cadena
            """
            zoo = Zoo(name=self._name, location=self._location)
            logger.debug(f"Zoológico construido: {zoo}")
            return zoo
