"""Calendar dates with day-based arithmetic and chronological comparison."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

_MESES_31 = frozenset({1, 3, 5, 7, 8, 10, 12})
_MESES_30 = frozenset({4, 6, 9, 11})


def es_bisiesto(anio: int) -> bool:
    """Return True if ``anio`` is a Gregorian leap year."""
    return anio % 4 == 0 and (anio % 400 == 0 or anio % 100 != 0)


def dias_mes(mes: int, anio: int) -> int:
    """Return the number of days in ``mes`` of ``anio``; 0 for an unknown month."""
    if mes in _MESES_31:
        return 31
    if mes in _MESES_30:
        return 30
    if mes == 2:
        return 29 if es_bisiesto(anio) else 28
    return 0


@total_ordering
@dataclass
class Fecha:
    """A day/month/year date; later dates compare greater."""

    dia: int
    mes: int
    anio: int

    def _clave(self) -> tuple[int, int, int]:
        return (self.anio, self.mes, self.dia)

    def copy(self) -> Fecha:
        """Return an independent copy of this date."""
        return Fecha(self.dia, self.mes, self.anio)

    def aumentar(self, dias: int) -> None:
        """Move this date forward by ``dias`` days."""
        if dias < 0:
            raise ValueError("la cantidad de dias no puede ser negativa")
        self.dia += dias
        while self.dia > (limite := dias_mes(self.mes, self.anio)):
            self.dia -= limite
            self.mes += 1
            if self.mes > 12:
                self.mes = 1
                self.anio += 1

    def comparar(self, otra: Fecha) -> int:
        """Return 1 if this date is later than ``otra``, -1 if earlier, 0 if equal."""
        a, b = self._clave(), otra._clave()
        return (a > b) - (a < b)

    def __lt__(self, otra: object) -> bool:
        if not isinstance(otra, Fecha):
            return NotImplemented
        return self._clave() < otra._clave()

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"