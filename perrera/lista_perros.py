"""Dogs kept in order of age, traversable in both directions."""

from __future__ import annotations

from bisect import insort_left
from collections.abc import Iterator

from .perro import Perro


def _edad(perro: Perro) -> int:
    return perro.edad


class ListaPerros:
    """Dogs ordered youngest first; a new dog goes before others of its age."""

    def __init__(self) -> None:
        self._perros: list[Perro] = []

    def insertar(self, perro: Perro) -> None:
        """Insert ``perro`` ahead of every dog of the same or greater age."""
        insort_left(self._perros, perro, key=_edad)

    def _indice(self, id_perro: int) -> int:
        for indice, perro in enumerate(self._perros):
            if perro.id == id_perro:
                return indice
        raise KeyError(id_perro)

    def remover(self, id_perro: int) -> Perro:
        """Remove and return the dog with ``id_perro``; raise KeyError if absent."""
        return self._perros.pop(self._indice(id_perro))

    def primero(self) -> Perro:
        """Return the youngest dog; raise IndexError if the list is empty."""
        if not self._perros:
            raise IndexError("la lista de perros es vacia")
        return self._perros[0]

    def ultimo(self) -> Perro:
        """Return the oldest dog; raise IndexError if the list is empty."""
        if not self._perros:
            raise IndexError("la lista de perros es vacia")
        return self._perros[-1]

    def nesimo(self, n: int) -> Perro:
        """Return the ``n``-th dog counting from 1; raise IndexError if out of range."""
        if not 1 <= n <= len(self._perros):
            raise IndexError(n)
        return self._perros[n - 1]

    def existe(self, id_perro: int) -> bool:
        """Return True if a dog with ``id_perro`` is in the list."""
        return any(perro.id == id_perro for perro in self._perros)

    def __len__(self) -> int:
        return len(self._perros)

    def __iter__(self) -> Iterator[Perro]:
        return iter(self._perros)

    def __reversed__(self) -> Iterator[Perro]:
        return reversed(self._perros)

    def formatear(self, invertido: bool = False) -> str:
        """Render the list under an ``LDE Perros:`` header, oldest first if ``invertido``."""
        perros = reversed(self) if invertido else iter(self)
        return "\n".join(["LDE Perros:", *(str(perro) for perro in perros)])

    def __str__(self) -> str:
        return self.formatear()