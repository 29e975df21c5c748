"""A binary search tree of people keyed by identity number."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice

from .fecha import Fecha
from .persona import Persona


@dataclass(eq=False)
class _Nodo:
    persona: Persona
    izq: _Nodo | None = None
    der: _Nodo | None = None


def _signo(valor: int) -> int:
    return (valor > 0) - (valor < 0)


def _en_orden(raiz: _Nodo | None) -> Iterator[_Nodo]:
    pila: list[_Nodo] = []
    nodo = raiz
    while pila or nodo is not None:
        while nodo is not None:
            pila.append(nodo)
            nodo = nodo.izq
        nodo = pila.pop()
        yield nodo
        nodo = nodo.der


def _post_orden(raiz: _Nodo | None) -> Iterator[_Nodo]:
    pila: list[tuple[_Nodo | None, bool]] = [(raiz, False)]
    while pila:
        nodo, visto = pila.pop()
        if nodo is None:
            continue
        if visto:
            yield nodo
        else:
            pila.append((nodo, True))
            pila.append((nodo.der, False))
            pila.append((nodo.izq, False))


def _quitar_maximo(raiz: _Nodo) -> tuple[_Nodo | None, Persona]:
    """Detach the rightmost node of ``raiz``; return the new root and its person."""
    padre: _Nodo | None = None
    nodo = raiz
    while nodo.der is not None:
        padre = nodo
        nodo = nodo.der
    if padre is None:
        return nodo.izq, nodo.persona
    padre.der = nodo.izq
    return raiz, nodo.persona


class ArbolPersonas:
    """People ordered by CI in an unbalanced binary search tree."""

    def __init__(self, personas: Iterable[Persona] = ()) -> None:
        self._raiz: _Nodo | None = None
        for persona in personas:
            self.insertar(persona)

    def insertar(self, persona: Persona) -> None:
        """Insert ``persona``; an equal CI goes to the right subtree."""
        nuevo = _Nodo(persona)
        if self._raiz is None:
            self._raiz = nuevo
            return
        nodo = self._raiz
        while True:
            if persona.ci < nodo.persona.ci:
                if nodo.izq is None:
                    nodo.izq = nuevo
                    return
                nodo = nodo.izq
            else:
                if nodo.der is None:
                    nodo.der = nuevo
                    return
                nodo = nodo.der

    def __iter__(self) -> Iterator[Persona]:
        return (nodo.persona for nodo in _en_orden(self._raiz))

    def _buscar(self, ci: object) -> _Nodo | None:
        nodo = self._raiz
        while nodo is not None and nodo.persona.ci != ci:
            nodo = nodo.izq if ci < nodo.persona.ci else nodo.der  # type: ignore[operator]
        return nodo

    def __contains__(self, ci: object) -> bool:
        if not isinstance(ci, int):
            return False
        return self._buscar(ci) is not None

    def obtener(self, ci: int) -> Persona:
        """Return the person with ``ci``; raise KeyError if it is not in the tree."""
        nodo = self._buscar(ci)
        if nodo is None:
            raise KeyError(ci)
        return nodo.persona

    def altura(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        altura = 0
        pila: list[tuple[_Nodo | None, int]] = [(self._raiz, 1)]
        while pila:
            nodo, nivel = pila.pop()
            if nodo is None:
                continue
            altura = max(altura, nivel)
            pila.append((nodo.izq, nivel + 1))
            pila.append((nodo.der, nivel + 1))
        return altura

    def max_ci(self) -> Persona:
        """Return the person with the greatest CI; raise ValueError if the tree is empty."""
        if self._raiz is None:
            raise ValueError("el arbol es vacio")
        nodo = self._raiz
        while nodo.der is not None:
            nodo = nodo.der
        return nodo.persona

    def remover(self, ci: int) -> Persona:
        """Remove and return the person with ``ci``; raise KeyError if absent.

        A node with two children takes the person with the greatest CI
        of its left subtree.
        """
        padre: _Nodo | None = None
        nodo = self._raiz
        while nodo is not None and nodo.persona.ci != ci:
            padre = nodo
            nodo = nodo.der if ci > nodo.persona.ci else nodo.izq
        if nodo is None:
            raise KeyError(ci)
        removida = nodo.persona
        if nodo.izq is not None and nodo.der is not None:
            nodo.izq, nodo.persona = _quitar_maximo(nodo.izq)
            return removida
        hijo = nodo.izq if nodo.izq is not None else nodo.der
        if padre is None:
            self._raiz = hijo
        elif padre.izq is nodo:
            padre.izq = hijo
        else:
            padre.der = hijo
        return removida

    def __len__(self) -> int:
        return sum(1 for _ in _en_orden(self._raiz))

    def nesima(self, n: int) -> Persona:
        """Return the ``n``-th person by CI, counting from 1; raise IndexError if out of range."""
        if n < 1:
            raise IndexError(n)
        persona = next(islice(self, n - 1, None), None)
        if persona is None:
            raise IndexError(n)
        return persona

    def filtrar_por_nacimiento(self, fecha: Fecha, criterio: int) -> ArbolPersonas:
        """Return a new tree holding copies of the people born before, on or after ``fecha``.

        A negative ``criterio`` keeps earlier births, zero keeps equal ones
        and a positive one keeps later ones.
        """
        objetivo = _signo(criterio)
        filtrados: dict[_Nodo, _Nodo | None] = {}
        for nodo in _post_orden(self._raiz):
            izq = filtrados.pop(nodo.izq, None) if nodo.izq is not None else None
            der = filtrados.pop(nodo.der, None) if nodo.der is not None else None
            if nodo.persona.nacimiento.comparar(fecha) == objetivo:
                nuevo: _Nodo | None = _Nodo(nodo.persona.copy(), izq, der)
            elif izq is None:
                nuevo = der
            elif der is None:
                nuevo = izq
            else:
                izq, persona = _quitar_maximo(izq)
                nuevo = _Nodo(persona, izq, der)
            filtrados[nodo] = nuevo
        resultado = ArbolPersonas()
        if self._raiz is not None:
            resultado._raiz = filtrados[self._raiz]
        return resultado

    def __str__(self) -> str:
        return "\n".join(str(persona) for persona in self)