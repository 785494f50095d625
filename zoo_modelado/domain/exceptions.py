class InvalidArgumentError(ValueError):
    """Error lanzado cuando un campo no cumple sus reglas de validación.

    Hereda de ValueError para que el código que ya captura ValueError
    siga funcionando.

    Attributes:
        field: Nombre del campo que falló la validación
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
