"""A line-oriented command interpreter over dates and dogs."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from .fecha import Fecha
from .lectura import Lector
from .perro import Perro

Comando = Callable[[], None]


class SesionError(Exception):
    """A command was issued in a state that does not allow it, or its input was malformed."""


class Sesion:
    """Reads commands from ``entrada`` and writes their results to ``salida``.

    Each command is preceded by a numbered prompt. ``Fin`` ends the session,
    ``#`` echoes a comment, and unknown commands are reported. Subclasses
    extend the command table by overriding ``_comandos``.
    """

    def __init__(self, entrada: TextIO | str, salida: TextIO | None = None) -> None:
        self.lector = Lector(entrada)
        self.salida = salida if salida is not None else sys.stdout
        self.fecha: Fecha | None = None
        self.perro: Perro | None = None

    def _escribir(self, texto: str) -> None:
        self.salida.write(texto)

    def _linea(self, texto: str) -> None:
        self.salida.write(texto + "\n")

    def _comandos(self) -> dict[str, Comando]:
        return {
            "crearFecha": self._crear_fecha,
            "imprimirFecha": self._imprimir_fecha,
            "copiarFecha": self._copiar_fecha,
            "liberarFecha": self._liberar_fecha,
            "aumentarDias": self._aumentar_dias,
            "compararFechas": self._comparar_fechas,
            "crearPerro": self._crear_perro,
            "liberarPerro": self._liberar_perro,
            "imprimirIdPerro": self._imprimir_id_perro,
            "imprimirNombrePerro": self._imprimir_nombre_perro,
            "imprimirEdadPerro": self._imprimir_edad_perro,
            "imprimirDescripcionPerro": self._imprimir_descripcion_perro,
            "imprimirFechaIngresoPerro": self._imprimir_fecha_ingreso_perro,
            "imprimirVitalidadPerro": self._imprimir_vitalidad_perro,
            "imprimirPerro": self._imprimir_perro,
            "copiarPerro": self._copiar_perro,
            "actualizarEdadPerro": self._actualizar_edad_perro,
            "actualizarVitalidadPerro": self._actualizar_vitalidad_perro,
        }

    def ejecutar(self) -> int:
        """Run commands until ``Fin`` or end of input; return how many were read."""
        comandos = self._comandos()
        contador = 0
        while True:
            contador += 1
            self._escribir(f"{contador}>")
            try:
                nombre = self.lector.palabra()
            except EOFError:
                return contador - 1
            if nombre == "Fin":
                self._linea("Fin.")
                return contador
            try:
                if nombre == "#":
                    self._linea(f"# {self.lector.resto_de_linea()}.")
                elif (accion := comandos.get(nombre)) is not None:
                    accion()
                else:
                    self._linea("Comando no reconocido.")
            except (EOFError, ValueError) as error:
                raise SesionError(f"entrada invalida en el comando {nombre!r}: {error}") from error
            self.lector.saltar_linea()

    def _fecha_actual(self) -> Fecha:
        if self.fecha is None:
            raise SesionError("no hay una fecha creada")
        return self.fecha

    def _perro_actual(self) -> Perro:
        if self.perro is None:
            raise SesionError("no hay un perro creado")
        return self.perro

    def _crear_fecha(self) -> None:
        if self.fecha is not None:
            raise SesionError("ya hay una fecha creada")
        self.fecha = self.lector.fecha()

    def _imprimir_fecha(self) -> None:
        self._linea(str(self._fecha_actual()))

    def _copiar_fecha(self) -> None:
        self._linea(str(self._fecha_actual().copy()))

    def _liberar_fecha(self) -> None:
        self._fecha_actual()
        self.fecha = None

    def _aumentar_dias(self) -> None:
        fecha = self._fecha_actual()
        dias = self.lector.nat()
        fecha.aumentar(dias)
        self._linea(f"La nueva fecha aplazada {dias} dias es: {fecha}")

    def _comparar_fechas(self) -> None:
        primera = self.lector.fecha()
        segunda = self.lector.fecha()
        comparacion = primera.comparar(segunda)
        if comparacion == 0:
            self._linea("Las fechas son iguales. ")
        elif comparacion == 1:
            self._linea("La primera fecha es posterior a la segunda. ")
        else:
            self._linea("La primera fecha es anterior a la segunda. ")

    def _crear_perro(self) -> None:
        if self.perro is not None:
            raise SesionError("ya hay un perro creado")
        fecha = self._fecha_actual()
        id_perro = self.lector.nat()
        nombre = self.lector.palabra()
        edad = self.lector.nat()
        vitalidad = self.lector.nat()
        descripcion = self.lector.resto_de_linea()
        self.perro = Perro(id_perro, nombre, edad, vitalidad, descripcion, fecha)
        self.fecha = None

    def _liberar_perro(self) -> None:
        self._perro_actual()
        self.perro = None

    def _imprimir_id_perro(self) -> None:
        self._linea(f"El id del perro es: {self._perro_actual().id}")

    def _imprimir_nombre_perro(self) -> None:
        self._linea(f"El nombre del perro es: {self._perro_actual().nombre}")

    def _imprimir_edad_perro(self) -> None:
        self._linea(f"La edad del perro es: {self._perro_actual().edad}")

    def _imprimir_descripcion_perro(self) -> None:
        self._linea(f"La descripcion del perro es: {self._perro_actual().descripcion}")

    def _imprimir_fecha_ingreso_perro(self) -> None:
        self._linea(f"La fecha de ingreso del perro es: {self._perro_actual().fecha_ingreso}")

    def _imprimir_vitalidad_perro(self) -> None:
        self._linea(f"La vitalidad del perro es: {self._perro_actual().vitalidad}")

    def _imprimir_perro(self) -> None:
        self._linea(str(self._perro_actual()))

    def _copiar_perro(self) -> None:
        self._linea(str(self._perro_actual().copy()))

    def _actualizar_edad_perro(self) -> None:
        perro = self._perro_actual()
        perro.edad = self.lector.nat()

    def _actualizar_vitalidad_perro(self) -> None:
        perro = self._perro_actual()
        perro.vitalidad = self.lector.nat()