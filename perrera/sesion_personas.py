"""Command interpreter extended with commands over one person."""

from __future__ import annotations

from typing import TextIO

from .persona import Persona
from .sesion import Comando, Sesion, SesionError


class PersonasSesion(Sesion):
    """A session that also manages one person and the dogs that person adopts."""

    def __init__(self, entrada: TextIO | str, salida: TextIO | None = None) -> None:
        super().__init__(entrada, salida)
        self.persona: Persona | None = None

    def _comandos(self) -> dict[str, Comando]:
        return {
            **super()._comandos(),
            "crearPersona": self._crear_persona,
            "imprimirCIPersona": self._imprimir_ci_persona,
            "imprimirNombreYApellidoPersona": self._imprimir_nombre_y_apellido_persona,
            "imprimirFechaNacimientoPersona": self._imprimir_fecha_nacimiento_persona,
            "imprimirPersona": self._imprimir_persona,
            "copiarPersona": self._copiar_persona,
            "agregarPerroPersona": self._agregar_perro_persona,
            "pertenecePerroPersona": self._pertenece_perro_persona,
            "cantidadPerrosPersona": self._cantidad_perros_persona,
            "liberarPersona": self._liberar_persona,
        }

    def _persona_actual(self) -> Persona:
        if self.persona is None:
            raise SesionError("no hay una persona creada")
        return self.persona

    def _crear_persona(self) -> None:
        if self.persona is not None:
            raise SesionError("ya hay una persona creada")
        ci = self.lector.entero()
        nombre = self.lector.palabra()
        apellido = self.lector.palabra()
        dia = self.lector.nat()
        mes = self.lector.nat()
        anio = self.lector.nat()
        self.persona = Persona.nueva(ci, nombre, apellido, dia, mes, anio)

    def _imprimir_ci_persona(self) -> None:
        self._linea(f"La CI de la persona es: {self._persona_actual().ci}")

    def _imprimir_nombre_y_apellido_persona(self) -> None:
        persona = self._persona_actual()
        self._linea(f"El nombre de la persona es: {persona.nombre}")
        self._linea(f"El apellido de la persona es: {persona.apellido}")

    def _imprimir_fecha_nacimiento_persona(self) -> None:
        persona = self._persona_actual()
        self._linea(f"La fecha de nacimiento de la persona es: {persona.nacimiento}")

    def _imprimir_persona(self) -> None:
        self._linea(str(self._persona_actual()))

    def _copiar_persona(self) -> None:
        copia = self._persona_actual().copy()
        self._linea("Persona copiada. Datos de la copia:")
        self._linea(str(copia))

    def _agregar_perro_persona(self) -> None:
        persona = self._persona_actual()
        persona.agregar_perro(self._perro_actual())

    def _pertenece_perro_persona(self) -> None:
        persona = self._persona_actual()
        id_perro = self.lector.entero()
        if persona.tiene_perro(id_perro):
            self._linea(f"El perro con id {id_perro} pertenece a la persona.")
        else:
            self._linea(f"El perro con id {id_perro} NO pertenece a la persona.")

    def _cantidad_perros_persona(self) -> None:
        cantidad = self._persona_actual().cantidad_perros()
        self._linea(f"La persona tiene {cantidad} perro/s.")

    def _liberar_persona(self) -> None:
        self._persona_actual()
        self.persona = None