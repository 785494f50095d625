import logging
from dataclasses import dataclass, field

from zoo_modelado.domain.services.field_validator import require_non_negative_int, require_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Animal:
    """Representa un animal del zoológico."""

    species: str = field(
        metadata={"description": "Especie del animal, no puede estar vacía"}
    )
    age: int = field(
        default=0,
        metadata={"description": "Edad del animal en años, cero o mayor"}
    )

    def __post_init__(self):
        require_text(self.species, "species")
        require_non_negative_int(self.age, "age")

    def __hash__(self) -> int:
        return hash((self.species, self.age))

    # Igualdad por valor para que sea coherente con __hash__
    def __eq__(self, other) -> bool:
        if not isinstance(other, Animal):
            return False
        return (self.species == other.species and
                self.age == other.age)

    class Builder:
        """Construye un Animal paso a paso; la validación ocurre en build()."""

        def __init__(self, species: str):
            self._species = species
            self._age = 0

        def age(self, age: int) -> 'Animal.Builder':
            self._age = age
            return self

        def build(self) -> 'Animal':
            """Valida los campos acumulados y crea el animal.

            Raises:
                InvalidArgumentError: Si la especie está vacía o la edad es negativa
            """
            animal = Animal(species=self._species, age=self._age)
            logger.debug(f"Animal construido: {animal}")
            return animal
