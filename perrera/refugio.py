"""A shelter holding dogs ordered by admission date."""

from __future__ import annotations

from bisect import bisect_left, insort_right
from collections.abc import Iterator

from .fecha import Fecha
from .perro import Perro

MAX_PERROS = 100


def _ingreso(perro: Perro) -> Fecha:
    return perro.fecha_ingreso


class Refugio:
    """Dogs kept in chronological order of admission, up to ``capacidad`` of them."""

    def __init__(self, capacidad: int = MAX_PERROS) -> None:
        self.capacidad = capacidad
        self._perros: list[Perro] = []

    def agregar(self, perro: Perro) -> bool:
        """Add ``perro`` after every dog admitted on or before its date.

        Returns False, leaving the shelter unchanged, when it is full.
        """
        if len(self._perros) >= self.capacidad:
            return False
        insort_right(self._perros, perro, key=_ingreso)
        return True

    def __iter__(self) -> Iterator[Perro]:
        return iter(self._perros)

    def __len__(self) -> int:
        return len(self._perros)

    def __contains__(self, id_perro: object) -> bool:
        return any(perro.id == id_perro for perro in self._perros)

    def _indice(self, id_perro: int) -> int:
        for indice, perro in enumerate(self._perros):
            if perro.id == id_perro:
                return indice
        raise KeyError(id_perro)

    def obtener(self, id_perro: int) -> Perro:
        """Return the dog with ``id_perro``; raise KeyError if it is not here."""
        return self._perros[self._indice(id_perro)]

    def ingresaron_en(self, fecha: Fecha) -> bool:
        """Return True if some dog was admitted on ``fecha`` (binary search)."""
        indice = bisect_left(self._perros, fecha, key=_ingreso)
        return indice < len(self._perros) and self._perros[indice].fecha_ingreso == fecha

    def perros_en(self, fecha: Fecha) -> list[Perro]:
        """Return the dogs admitted on ``fecha``, oldest entry first."""
        if not self.ingresaron_en(fecha):
            return []
        return [perro for perro in self._perros if perro.fecha_ingreso == fecha]

    def remover(self, id_perro: int) -> Perro:
        """Remove and return the dog with ``id_perro``; raise KeyError if absent."""
        return self._perros.pop(self._indice(id_perro))

    def __str__(self) -> str:
        return "\n".join(str(perro) for perro in self._perros)