"""Eccezioni del motore di simulazione."""

from typing import Any, Optional


class InvalidParameter(ValueError):
    """
    Parametro fisico o di finestra non valido (massa/rigidezza non positive,
    durata non positiva, numero di campioni negativo, ...).

    Sottoclasse di ValueError: il chiamante può correggere l'input e riprovare.
    """

    def __init__(self, message: str, name: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.name = name
        self.value = value
