"""Adoptions of dogs by people, kept in order of adoption date."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterator
from dataclasses import dataclass

from .fecha import Fecha
from .perro import Perro
from .persona import Persona

_SEPARADOR = "---------------------------"


@dataclass
class Adopcion:
    """A person adopting a dog on a given date."""

    fecha: Fecha
    persona: Persona
    perro: Perro

    def __str__(self) -> str:
        return "\n".join(
            (
                _SEPARADOR,
                f"Adopcion en fecha {self.fecha}",
                "Adoptante:",
                f"Persona {self.persona.nombre} {self.persona.apellido}",
                f"CI: {self.persona.ci}",
                "Adoptado:",
                f"Perro {self.perro.id}",
                f"Nombre: {self.perro.nombre}",
                f"Fecha de ingreso: {self.perro.fecha_ingreso}",
                _SEPARADOR,
            )
        )


def _fecha(adopcion: Adopcion) -> Fecha:
    return adopcion.fecha


class ListaAdopciones:
    """Adoptions ordered by date; equal dates keep insertion order."""

    def __init__(self) -> None:
        self._adopciones: list[Adopcion] = []

    def insertar(self, fecha: Fecha, persona: Persona, perro: Perro) -> Adopcion:
        """Record an adoption after every one made on or before ``fecha``."""
        adopcion = Adopcion(fecha, persona, perro)
        insort_right(self._adopciones, adopcion, key=_fecha)
        return adopcion

    def _indice(self, ci_persona: int, id_perro: int) -> int | None:
        for indice, adopcion in enumerate(self._adopciones):
            if adopcion.persona.ci == ci_persona and adopcion.perro.id == id_perro:
                return indice
        return None

    def existe(self, ci_persona: int, id_perro: int) -> bool:
        """Return True if the person adopted the dog."""
        return self._indice(ci_persona, id_perro) is not None

    def remover(self, ci_persona: int, id_perro: int) -> Adopcion:
        """Remove and return the adoption; raise KeyError if there is none."""
        indice = self._indice(ci_persona, id_perro)
        if indice is None:
            raise KeyError((ci_persona, id_perro))
        return self._adopciones.pop(indice)

    def __iter__(self) -> Iterator[Adopcion]:
        return iter(self._adopciones)

    def __len__(self) -> int:
        return len(self._adopciones)

    def __str__(self) -> str:
        return "\n".join(str(adopcion) for adopcion in self._adopciones)