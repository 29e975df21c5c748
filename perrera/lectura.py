"""A reader of whitespace-separated values from a text stream."""

from __future__ import annotations

import io
import re
from typing import TextIO

from .fecha import Fecha

_PALABRA = re.compile(r"\S+")
_NAT = re.compile(r"\+?\d+")
_ENTERO = re.compile(r"[+-]?\d+")
_REAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Lector:
    """Reads words, numbers, dates and line remainders from a stream or string."""

    def __init__(self, entrada: TextIO | str) -> None:
        self._entrada = io.StringIO(entrada) if isinstance(entrada, str) else entrada
        self._linea = ""
        self._pos = 0

    def _disponible(self) -> bool:
        if self._pos < len(self._linea):
            return True
        linea = self._entrada.readline()
        if not linea:
            return False
        self._linea, self._pos = linea, 0
        return True

    def _saltar_blancos(self) -> None:
        while True:
            if not self._disponible():
                raise EOFError("fin de la entrada")
            while self._pos < len(self._linea) and self._linea[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._linea):
                return

    def _leer(self, patron: re.Pattern[str], que: str) -> str:
        self._saltar_blancos()
        encontrado = patron.match(self._linea, self._pos)
        if encontrado is None:
            raise ValueError(f"se esperaba {que}: {self._linea[self._pos:].rstrip()!r}")
        self._pos = encontrado.end()
        return encontrado.group()

    def _literal(self, caracter: str) -> None:
        if self._linea.startswith(caracter, self._pos):
            self._pos += len(caracter)
        else:
            raise ValueError(f"se esperaba {caracter!r}")

    def palabra(self) -> str:
        """Return the next run of non-blank characters."""
        return self._leer(_PALABRA, "una palabra")

    def nat(self) -> int:
        """Return the next non-negative integer."""
        return int(self._leer(_NAT, "un natural"))

    def entero(self) -> int:
        """Return the next integer, possibly signed."""
        return int(self._leer(_ENTERO, "un entero"))

    def real(self) -> float:
        """Return the next decimal number."""
        return float(self._leer(_REAL, "un real"))

    def resto_de_linea(self) -> str:
        """Return the rest of the current line without consuming its newline."""
        if not self._disponible():
            raise EOFError("fin de la entrada")
        fin = self._linea.find("\n", self._pos)
        if fin < 0:
            fin = len(self._linea)
        texto = self._linea[self._pos:fin]
        self._pos = fin
        return texto

    def fecha(self) -> Fecha:
        """Return a date written as ``dia/mes/anio``."""
        dia = self.nat()
        self._literal("/")
        mes = self.nat()
        self._literal("/")
        anio = self.nat()
        return Fecha(dia, mes, anio)

    def saltar_linea(self) -> str:
        """Consume and return the rest of the current line, newline included; "" at end of input."""
        if not self._disponible():
            return ""
        texto = self._linea[self._pos:]
        self._pos = len(self._linea)
        return texto