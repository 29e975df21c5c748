"""Command interpreter for dates, dogs and a shelter."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .refugio import Refugio
from .sesion import Comando, Sesion, SesionError


class RefugioSesion(Sesion):
    """A session that also manages one shelter."""

    def __init__(self, entrada: TextIO | str, salida: TextIO | None = None) -> None:
        super().__init__(entrada, salida)
        self.refugio: Refugio | None = None

    def _comandos(self) -> dict[str, Comando]:
        return {
            **super()._comandos(),
            "crearRefugio": self._crear_refugio,
            "liberarRefugio": self._liberar_refugio,
            "agregarEnRefugio": self._agregar_en_refugio,
            "imprimirRefugio": self._imprimir_refugio,
            "estaEnRefugio": self._esta_en_refugio,
            "obtenerDeRefugio": self._obtener_de_refugio,
            "ingresaronPerrosFechaRefugio": self._ingresaron_perros_fecha,
            "imprimirPerrosFechaRefugio": self._imprimir_perros_fecha,
            "removerDeRefugio": self._remover_de_refugio,
        }

    def _refugio_actual(self) -> Refugio:
        if self.refugio is None:
            raise SesionError("no hay un refugio creado")
        return self.refugio

    def _crear_refugio(self) -> None:
        if self.refugio is not None:
            raise SesionError("ya hay un refugio creado")
        self.refugio = Refugio()

    def _liberar_refugio(self) -> None:
        self._refugio_actual()
        self.refugio = None

    def _agregar_en_refugio(self) -> None:
        refugio = self._refugio_actual()
        refugio.agregar(self._perro_actual())
        self.perro = None

    def _imprimir_refugio(self) -> None:
        for perro in self._refugio_actual():
            self._linea(str(perro))

    def _esta_en_refugio(self) -> None:
        refugio = self._refugio_actual()
        id_perro = self.lector.nat()
        if id_perro in refugio:
            self._linea(f"El perro con id {id_perro} esta en el refugio.")
        else:
            self._linea(f"El perro con id {id_perro} NO esta en el refugio.")

    def _obtener_de_refugio(self) -> None:
        refugio = self._refugio_actual()
        id_perro = self.lector.nat()
        if id_perro not in refugio:
            raise SesionError(f"el perro con id {id_perro} no esta en el refugio")
        self._linea(str(refugio.obtener(id_perro)))

    def _ingresaron_perros_fecha(self) -> None:
        refugio = self._refugio_actual()
        fecha = self.lector.fecha()
        if refugio.ingresaron_en(fecha):
            for perro in refugio.perros_en(fecha):
                self._linea(str(perro))
        else:
            self._linea("No se encontraron perros ingresados en la fecha determinada.")

    def _imprimir_perros_fecha(self) -> None:
        refugio = self._refugio_actual()
        fecha = self.lector.fecha()
        for perro in refugio.perros_en(fecha):
            self._linea(str(perro))

    def _remover_de_refugio(self) -> None:
        refugio = self._refugio_actual()
        id_perro = self.lector.nat()
        if id_perro in refugio:
            refugio.remover(id_perro)
            self._linea(f"El perro con id {id_perro} se removió del refugio.")
        else:
            self._linea(f"El perro con id {id_perro} NO está en el refugio.")


def main(argv: list[str] | None = None) -> int:
    """Run a shelter session on a file or standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="perrera-refugio",
        description="Interpreta comandos sobre fechas, perros y un refugio.",
    )
    parser.add_argument("entrada", nargs="?", help="archivo de comandos (por defecto, la entrada estandar)")
    args = parser.parse_args(argv)
    try:
        if args.entrada is None:
            RefugioSesion(sys.stdin).ejecutar()
        else:
            with open(args.entrada, encoding="utf-8") as archivo:
                RefugioSesion(archivo).ejecutar()
    except SesionError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())