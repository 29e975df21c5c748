"""Dogs held by the shelter."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .fecha import Fecha

MAX_NOMBRE = 50
MAX_DESCRIPCION = 100


@dataclass
class Perro:
    """A dog with its shelter record and admission date."""

    id: int
    nombre: str
    edad: int
    vitalidad: int
    descripcion: str
    fecha_ingreso: Fecha

    def copy(self) -> Perro:
        """Return a copy that shares no mutable state with this dog."""
        return replace(self, fecha_ingreso=self.fecha_ingreso.copy())

    def __str__(self) -> str:
        return "\n".join(
            (
                f"Perro {self.id}",
                f"Nombre: {self.nombre}",
                f"Edad: {self.edad}",
                f"Descripcion: {self.descripcion}",
                f"Fecha de ingreso: {self.fecha_ingreso}",
                f"Vitalidad: {self.vitalidad}",
            )
        )