"""Reglas de validación compartidas por los modelos del dominio."""

import logging
from typing import Any, Optional

from zoo_modelado.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def _reject(field_name: str, value: Any, message: str) -> InvalidArgumentError:
    logger.debug(f"Valor rechazado para '{field_name}': {value!r} ({message})")
    return InvalidArgumentError(field_name, message)


def _is_int(value: Any) -> bool:
    # bool es subclase de int, pero no es una cantidad válida
    return isinstance(value, int) and not isinstance(value, bool)


def require_text(value: Any, field_name: str) -> str:
    """Verifica que un campo de texto no sea None ni esté vacío.

    Args:
        value: Valor a validar
        field_name: Nombre del campo, usado en el mensaje de error

    Returns:
        El mismo valor, sin modificar

    Raises:
        InvalidArgumentError: Si el valor es None, no es una cadena o solo
            contiene espacios en blanco
    """
    if not isinstance(value, str) or not value.strip():
        raise _reject(field_name, value, f"{field_name} cannot be None or empty")
    return value


def require_optional_text(value: Any, field_name: str) -> Optional[str]:
    """Verifica que un campo opcional sea None o una cadena."""
    if value is not None and not isinstance(value, str):
        raise _reject(field_name, value, f"{field_name} must be a string")
    return value


def require_non_negative_int(value: Any, field_name: str) -> int:
    """Verifica que un campo sea un entero mayor o igual que cero.

    Raises:
        InvalidArgumentError: Si el valor no es entero o es negativo
    """
    if not _is_int(value):
        raise _reject(field_name, value, f"{field_name} must be an integer")
    if value < 0:
        raise _reject(field_name, value, f"{field_name} cannot be negative")
    return value


def require_positive_int(value: Any, field_name: str) -> int:
    """Verifica que un campo sea un entero estrictamente positivo.

    Raises:
        InvalidArgumentError: Si el valor no es entero o es menor o igual que cero
    """
    if not _is_int(value):
        raise _reject(field_name, value, f"{field_name} must be an integer")
    if value <= 0:
        raise _reject(field_name, value, f"{field_name} must be greater than 0")
    return value
