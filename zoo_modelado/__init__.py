"""Módulo principal para el modelado de zoológicos, animales y recintos."""

# Para facilitar los imports
from .domain.models.zoo import Zoo
from .domain.models.animal import Animal
from .domain.models.enclosure import Enclosure
# Excepciones
from .domain.exceptions import InvalidArgumentError
