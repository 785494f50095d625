import logging
from dataclasses import dataclass, field

from zoo_modelado.domain.services.field_validator import require_positive_int, require_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Enclosure:
    """Representa un recinto para animales del zoológico.

    Dos recintos son iguales si coinciden su tipo y su capacidad.
    """

    type: str = field(
        metadata={"description": "Tipo de recinto, por ejemplo 'Jaula' o 'Acuario'"}
    )
    capacity: int = field(
        metadata={"description": "Número máximo de animales, mayor que cero"}
    )

    def __post_init__(self):
        require_text(self.type, "type")
        require_positive_int(self.capacity, "capacity")

    def __hash__(self) -> int:
        return hash((self.type, self.capacity))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Enclosure):
            return False
        return (self.type == other.type and
                self.capacity == other.capacity)

    class Builder:
        """Construye un Enclosure paso a paso; la validación ocurre en build()."""

        def __init__(self, type: str):
            self._type = type
            # Sin capacidad explícita build() falla
            self._capacity = 0

        def capacity(self, capacity: int) -> 'Enclosure.Builder':
            self._capacity = capacity
            return self

        def build(self) -> 'Enclosure':
            """Valida los campos acumulados y crea el recinto.

            Returns:
                Instancia inmutable de Enclosure

            Raises:
                InvalidArgumentError: Si el tipo está vacío o la capacidad no es
                    mayor que cero
            """
            enclosure = Enclosure(type=self._type, capacity=self._capacity)
            logger.debug(f"Recinto construido: {enclosure}")
            return enclosure
