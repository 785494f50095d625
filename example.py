#!/usr/bin/env python
"""
Ejemplo de uso de los objetos de valor del zoológico.

Este script construye un zoológico, un animal y un recinto mediante sus
builders y muestra cómo se comportan la validación y la igualdad.
"""

import logging
import sys

from zoo_modelado import Animal, Enclosure, InvalidArgumentError, Zoo


def main():
    """Función principal del ejemplo."""
    # 1. Configurar logging básico antes de crear cualquier objeto
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logger = logging.getLogger(__name__)
    logger.info("Iniciando ejemplo de modelado del zoológico")

    # 2. Construir objetos válidos
    zoo = Zoo.Builder("Central Zoo").location("Kyiv").build()
    animal = Animal.Builder("Lion").age(5).build()
    enclosure = Enclosure.Builder("Cage").capacity(10).build()
    logger.info(f"Creados: {zoo}, {animal}, {enclosure}")

    # 3. Igualdad por valor
    same_zoo = Zoo.Builder("Central Zoo").location("Kyiv").build()
    logger.info(f"¿Zoológicos iguales? {zoo == same_zoo} "
                f"(hash iguales: {hash(zoo) == hash(same_zoo)})")

    # 4. Validación en build()
    try:
        Enclosure.Builder("Cage").capacity(-1).build()
    except InvalidArgumentError as e:
        logger.warning(f"Recinto rechazado en el campo '{e.field}': {e}")

    logger.info("Ejemplo completado con éxito.")


if __name__ == "__main__":
    main()
