"""People who can adopt dogs."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fecha import Fecha
from .perro import Perro

MAX_NOMBRE_PERSONA = 100
MAX_APELLIDO_PERSONA = 100
MAX_PERROS_PERSONA = 5


@dataclass
class Persona:
    """A person with an identity number, birth date and adopted dogs."""

    ci: int
    nombre: str
    apellido: str
    nacimiento: Fecha
    perros: list[Perro] = field(default_factory=list)

    @classmethod
    def nueva(cls, ci: int, nombre: str, apellido: str, dia: int, mes: int, anio: int) -> Persona:
        """Create a person born on the given day, month and year, with no dogs."""
        return cls(ci, nombre, apellido, Fecha(dia, mes, anio))

    def agregar_perro(self, perro: Perro) -> bool:
        """Store a copy of ``perro``; return False and do nothing if the collection is full."""
        if len(self.perros) >= MAX_PERROS_PERSONA:
            return False
        self.perros.append(perro.copy())
        return True

    def tiene_perro(self, id_perro: int) -> bool:
        """Return True if a dog with ``id_perro`` belongs to this person."""
        return any(perro.id == id_perro for perro in self.perros)

    def cantidad_perros(self) -> int:
        """Return how many dogs this person has."""
        return len(self.perros)

    def copy(self) -> Persona:
        """Return a copy that shares no mutable state with this person."""
        return Persona(
            self.ci,
            self.nombre,
            self.apellido,
            self.nacimiento.copy(),
            [perro.copy() for perro in self.perros],
        )

    def __str__(self) -> str:
        lineas = [
            f"Persona {self.nombre} {self.apellido}",
            f"CI: {self.ci}",
            f"Fecha de Nacimiento: {self.nacimiento}",
            "Perros adoptados:",
        ]
        lineas.extend(str(perro) for perro in self.perros)
        return "\n".join(lineas)