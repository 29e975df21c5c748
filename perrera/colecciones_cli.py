"""Command interpreter over people, adoptions, a tree of people and a list of dogs."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator
from typing import TextIO

from .adopciones import ListaAdopciones
from .arbol_personas import ArbolPersonas
from .lista_perros import ListaPerros
from .persona import Persona
from .sesion import Comando, SesionError
from .sesion_personas import PersonasSesion


def _orden_balanceado(inicio: int, final: int) -> Iterator[int]:
    """Yield indices so that inserting a sorted range in this order builds a balanced tree."""
    if inicio <= final:
        medio = (inicio + final) // 2
        yield medio
        yield from _orden_balanceado(inicio, medio - 1)
        yield from _orden_balanceado(medio + 1, final)


def _arbol_de_prueba(tamanio: int) -> ArbolPersonas:
    personas = [Persona.nueva(ci, "Carlos", "Luna", 2, 5, 1960) for ci in range(tamanio)]
    arbol = ArbolPersonas()
    for indice in _orden_balanceado(0, tamanio - 1):
        arbol.insertar(personas[indice])
    return arbol


class ColeccionesSesion(PersonasSesion):
    """A session that also manages adoptions, a tree of people and an age-ordered list of dogs.

    An absent adoption list or tree behaves as an empty one; the list of dogs
    must be created before it is used.
    """

    def __init__(self, entrada: TextIO | str, salida: TextIO | None = None) -> None:
        super().__init__(entrada, salida)
        self.adopciones: ListaAdopciones | None = None
        self.arbol: ArbolPersonas | None = None
        self.lista_perros: ListaPerros | None = None

    def _comandos(self) -> dict[str, Comando]:
        return {
            **super()._comandos(),
            "crearLSEAdopcionesVacia": self._crear_adopciones,
            "insertarLSEAdopciones": self._insertar_adopcion,
            "imprimirLSEAdopciones": self._imprimir_adopciones,
            "liberarLSEAdopciones": self._liberar_adopciones,
            "esVaciaLSEAdopciones": self._es_vacia_adopciones,
            "existeAdopcionLSEAdopciones": self._existe_adopcion,
            "removerAdopcionLSEAdopciones": self._remover_adopcion,
            "crearABBPersonasVacio": self._crear_arbol,
            "insertarPersonaABBPersonas": self._insertar_persona_arbol,
            "imprimirABBPersonas": self._imprimir_arbol,
            "existePersonaABBPersonas": self._existe_persona_arbol,
            "obtenerPersonaABBPersonas": self._obtener_persona_arbol,
            "alturaABBPersonas": self._altura_arbol,
            "maxCIPersonaABBPersonas": self._max_ci_arbol,
            "cantidadABBPersonas": self._cantidad_arbol,
            "obtenerNesimaPersonaABBPersonas": self._nesima_persona_arbol,
            "removerPersonaABBPersonas": self._remover_persona_arbol,
            "liberarABBPersonas": self._liberar_arbol,
            "filtradoPorFechaDeNacimientoABBPersonas": self._filtrar_arbol,
            "alturaABBPersonasTiempo": self._altura_arbol_tiempo,
            "obtenerExistePersonaABBPersonasTiempo": self._obtener_existe_tiempo,
            "crearLDEPerrosVacia": self._crear_lista_perros,
            "insertarLDEPerros": self._insertar_lista_perros,
            "imprimirLDEPerros": self._imprimir_lista_perros,
            "imprimirInvertidoLDEPerros": self._imprimir_invertido_lista_perros,
            "cantidadLDEPerros": self._cantidad_lista_perros,
            "obtenerPrimeroLDEPerros": self._primero_lista_perros,
            "obtenerUltimoLDEPerros": self._ultimo_lista_perros,
            "obtenerNesimoLDEPerros": self._nesimo_lista_perros,
            "existePerroLDEPerros": self._existe_lista_perros,
            "removerPerroLDEPerros": self._remover_lista_perros,
            "liberarLDEPerros": self._liberar_lista_perros,
        }

    # Adoptions

    def _lista_adopciones(self) -> ListaAdopciones:
        return self.adopciones if self.adopciones is not None else ListaAdopciones()

    def _crear_adopciones(self) -> None:
        if self.adopciones is not None and len(self.adopciones) > 0:
            raise SesionError("ya hay una lista de adopciones con elementos")
        self.adopciones = ListaAdopciones()

    def _insertar_adopcion(self) -> None:
        fecha = self._fecha_actual()
        persona = self._persona_actual()
        perro = self._perro_actual()
        if self.adopciones is None:
            self.adopciones = ListaAdopciones()
        self.adopciones.insertar(fecha, persona, perro)
        self._linea(
            f"Adopcion de persona de CI {persona.ci} y perro de id {perro.id} "
            "agregada de forma exitosa."
        )
        self.fecha = None
        self.persona = None
        self.perro = None

    def _imprimir_adopciones(self) -> None:
        self._linea("Lista de adopciones:")
        for adopcion in self._lista_adopciones():
            self._linea(str(adopcion))
        self._linea("Fin lista de adopciones.")

    def _liberar_adopciones(self) -> None:
        self.adopciones = None

    def _es_vacia_adopciones(self) -> None:
        if len(self._lista_adopciones()) == 0:
            self._linea("La lista de adopciones es vacia.")
        else:
            self._linea("La lista de adopciones NO es vacia.")

    def _existe_adopcion(self) -> None:
        ci = self.lector.entero()
        id_perro = self.lector.entero()
        if self._lista_adopciones().existe(ci, id_perro):
            self._linea(f"Existe una adopcion de la persona de CI {ci} al perro {id_perro} en la lista.")
        else:
            self._linea(f"NO Existe una adopcion de la persona de CI {ci} al perro {id_perro} en la lista.")

    def _remover_adopcion(self) -> None:
        ci = self.lector.entero()
        id_perro = self.lector.entero()
        lista = self._lista_adopciones()
        if not lista.existe(ci, id_perro):
            raise SesionError(f"no existe la adopcion de la persona {ci} al perro {id_perro}")
        lista.remover(ci, id_perro)
        self._linea(f"Adopcion de la persona de CI {ci} al perro {id_perro} removida de la lista.")

    # Tree of people

    def _arbol_actual(self) -> ArbolPersonas:
        return self.arbol if self.arbol is not None else ArbolPersonas()

    def _crear_arbol(self) -> None:
        if self.arbol is not None and len(self.arbol) > 0:
            raise SesionError("ya hay un arbol de personas con elementos")
        self.arbol = ArbolPersonas()

    def _insertar_persona_arbol(self) -> None:
        persona = self._persona_actual()
        if self.arbol is None:
            self.arbol = ArbolPersonas()
        self.arbol.insertar(persona)
        self.persona = None

    def _imprimir_arbol(self) -> None:
        for persona in self._arbol_actual():
            self._linea(str(persona))

    def _existe_persona_arbol(self) -> None:
        ci = self.lector.entero()
        if ci in self._arbol_actual():
            self._linea(f"La persona con ci {ci} pertenece al arbol.")
        else:
            self._linea(f"La persona con ci {ci} NO pertenece al arbol.")

    def _obtener_persona_arbol(self) -> None:
        ci = self.lector.entero()
        arbol = self._arbol_actual()
        if ci in arbol:
            self._linea(str(arbol.obtener(ci)))
        else:
            self._linea(f"La persona con CI {ci} no se puede imprimir pues NO pertenece al arbol.")

    def _altura_arbol(self) -> None:
        self._linea(f"La altura del arbol es {self._arbol_actual().altura()}.")

    def _max_ci_arbol(self) -> None:
        try:
            persona = self._arbol_actual().max_ci()
        except ValueError as error:
            raise SesionError("el arbol de personas es vacio") from error
        self._linea(f"La mayor cedula en el arbol es {persona.ci}.")

    def _cantidad_arbol(self) -> None:
        self._linea(f"La cantidad de personas en el arbol es {len(self._arbol_actual())}.")

    def _nesima_persona_arbol(self) -> None:
        n = self.lector.entero()
        arbol = self._arbol_actual()
        cantidad = len(arbol)
        if cantidad < n:
            self._linea(f"No se puede imprimir la persona nro {n} del arbol porque solo hay {cantidad}.")
            return
        try:
            persona = arbol.nesima(n)
        except IndexError as error:
            raise SesionError(f"posicion invalida: {n}") from error
        self._linea(f"Persona nro {n} del abb personas:")
        self._linea(str(persona))

    def _remover_persona_arbol(self) -> None:
        ci = self.lector.entero()
        arbol = self._arbol_actual()
        if ci in arbol:
            arbol.remover(ci)
            self._linea(f"La persona con id {ci} se removio del arbol.")
        else:
            self._linea(f"La persona con CI {ci} no se puede remover porque NO pertenece al arbol.")

    def _liberar_arbol(self) -> None:
        self.arbol = None

    def _filtrar_arbol(self) -> None:
        fecha = self.lector.fecha()
        criterio = self.lector.entero()
        for persona in self._arbol_actual().filtrar_por_nacimiento(fecha, criterio):
            self._linea(str(persona))

    def _altura_arbol_tiempo(self) -> None:
        tamanio = self.lector.nat()
        limite = self.lector.nat()
        arbol = _arbol_de_prueba(tamanio)
        inicio = time.process_time()
        altura = arbol.altura()
        tiempo = time.process_time() - inicio
        if tiempo > limite:
            self._linea(f"ERROR, tiempo excedido; {tiempo:.1f} > {limite} ")
        else:
            self._linea(f"La altura del arbol es {altura}. Calculado correctamente en menos de {limite}s.")

    def _obtener_existe_tiempo(self) -> None:
        tamanio = self.lector.nat()
        limite = self.lector.real()
        if tamanio == 0:
            raise SesionError("el arbol de prueba no puede ser vacio")
        arbol = _arbol_de_prueba(tamanio)
        cedulas = (0, tamanio - 1, tamanio // 3, (2 * tamanio) // 3)
        inicio = time.process_time()
        existen = [ci in arbol for ci in cedulas]
        personas = [arbol.obtener(ci) for ci in cedulas]
        tiempo = time.process_time() - inicio
        if tiempo > limite:
            self._linea(f"ERROR, tiempo excedido: {tiempo:.3f} > {limite:.3f} ")
        else:
            banderas = " ".join(str(int(existe)) for existe in existen)
            obtenidas = " ".join(str(persona.ci) for persona in personas)
            self._linea(f"Se obtuvieron las personas {banderas} con cedulas respectivas {obtenidas}")
            self._linea(f"Calculado correctamente en menos de {limite:.3f}s.")

    # List of dogs

    def _lista_perros_actual(self) -> ListaPerros:
        if self.lista_perros is None:
            raise SesionError("no hay una lista de perros creada")
        return self.lista_perros

    def _crear_lista_perros(self) -> None:
        if self.lista_perros is not None:
            raise SesionError("ya hay una lista de perros creada")
        self.lista_perros = ListaPerros()

    def _insertar_lista_perros(self) -> None:
        lista = self._lista_perros_actual()
        lista.insertar(self._perro_actual())
        self.perro = None

    def _imprimir_lista_perros(self) -> None:
        self._linea(self._lista_perros_actual().formatear(False))

    def _imprimir_invertido_lista_perros(self) -> None:
        self._linea(self._lista_perros_actual().formatear(True))

    def _cantidad_lista_perros(self) -> None:
        self._linea(f"La cantidad de perros en la lista es {len(self._lista_perros_actual())}")

    def _primero_lista_perros(self) -> None:
        lista = self._lista_perros_actual()
        if len(lista) > 0:
            self._linea("Primer perro:")
            self._linea(str(lista.primero()))
        else:
            self._linea("No se puede obtener el primero de la LDE de perros porque es vacia")

    def _ultimo_lista_perros(self) -> None:
        lista = self._lista_perros_actual()
        if len(lista) > 0:
            self._linea("Ultimo perro:")
            self._linea(str(lista.ultimo()))
        else:
            self._linea("No se puede obtener el ultimo de la LDE de perros porque es vacia")

    def _nesimo_lista_perros(self) -> None:
        lista = self._lista_perros_actual()
        n = self.lector.nat()
        try:
            perro = lista.nesimo(n)
        except IndexError as error:
            raise SesionError(f"no hay un perro en la posicion {n}") from error
        self._linea(f"Perro en la posicion {n}:")
        self._linea(str(perro))

    def _existe_lista_perros(self) -> None:
        lista = self._lista_perros_actual()
        id_perro = self.lector.entero()
        if lista.existe(id_perro):
            self._linea(f"El perro de id {id_perro} pertenece a la lista.")
        else:
            self._linea(f"El perro de id {id_perro} NO pertenece a la lista.")

    def _remover_lista_perros(self) -> None:
        lista = self._lista_perros_actual()
        id_perro = self.lector.nat()
        try:
            perro = lista.remover(id_perro)
        except KeyError as error:
            raise SesionError(f"el perro con id {id_perro} no esta en la lista") from error
        self._linea("Perro removido de la lista:")
        self._linea(str(perro))

    def _liberar_lista_perros(self) -> None:
        self._lista_perros_actual()
        self.lista_perros = None


def main(argv: list[str] | None = None) -> int:
    """Run a collections session on a file or standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="perrera-colecciones",
        description="Interpreta comandos sobre personas, adopciones, arboles y listas de perros.",
    )
    parser.add_argument("entrada", nargs="?", help="archivo de comandos (por defecto, la entrada estandar)")
    args = parser.parse_args(argv)
    try:
        if args.entrada is None:
            ColeccionesSesion(sys.stdin).ejecutar()
        else:
            with open(args.entrada, encoding="utf-8") as archivo:
                ColeccionesSesion(archivo).ejecutar()
    except SesionError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())