# perrera

Records for a dog shelter: calendar dates, dogs, people who adopt them,
and the collections that keep them in order. Two line-oriented command
interpreters drive everything from a file or standard input.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The building blocks

- `perrera.fecha.Fecha`: a day/month/year date. Dates compare
  chronologically (`<`, `==`, ...), and `comparar(otra)` returns `1`, `0`
  or `-1`. `aumentar(dias)` moves the date forward in place, taking month
  lengths and leap years into account (`es_bisiesto`, `dias_mes`); a
  negative count raises `ValueError`. `copy()` returns an independent
  date. A date prints as `d/m/aaaa`.
- `perrera.perro.Perro`: a dog with `id`, `nombre`, `edad`, `vitalidad`,
  `descripcion` and `fecha_ingreso`. `copy()` also copies the date.
- `perrera.persona.Persona`: a person with an identity number (`ci`),
  name, surname, birth date and up to five adopted dogs. Build one with
  `Persona.nueva(ci, nombre, apellido, dia, mes, anio)`. `agregar_perro`
  stores its own copy of the dog and returns `False` when the person
  already has five; `tiene_perro(id_perro)` and `cantidad_perros()` query
  the collection.
- `perrera.refugio.Refugio`: the shelter, holding up to `capacidad` dogs
  (100 by default) in order of intake date; dogs with the same date keep
  the order in which they were added. `agregar` returns `False` when the
  shelter is full. Supports `len()`, `in` (by dog id), iteration,
  `obtener` and `remover` (both raise `KeyError` for an unknown id),
  `ingresaron_en(fecha)` (a binary search) and `perros_en(fecha)`.
- `perrera.adopciones.ListaAdopciones`: adoptions (`Adopcion`: a date, a
  person and a dog) ordered by date, with equal dates in insertion order.
  An adoption is identified by the person's CI and the dog's id:
  `existe(ci, id)`, `remover(ci, id)` (raises `KeyError` if absent).
- `perrera.lista_perros.ListaPerros`: dogs ordered by age, youngest
  first; a new dog goes before others of the same age. Walkable in both
  directions (`iter`, `reversed`), with `primero`, `ultimo`, `nesimo(n)`
  (counting from 1; each raises `IndexError` when there is no such dog),
  `existe`, `remover` and `formatear(invertido)`.
- `perrera.arbol_personas.ArbolPersonas`: an unbalanced binary search
  tree of people keyed by CI (an equal CI goes to the right). Offers
  `in`, `len()`, in-order iteration, `obtener`, `remover` (a node with two
  children takes the greatest CI of its left subtree), `altura`,
  `max_ci`, `nesima(n)` and `filtrar_por_nacimiento(fecha, criterio)`,
  which returns a new tree of copies of the people born before
  (`criterio < 0`), on (`== 0`) or after (`> 0`) the date.
- `perrera.lectura.Lector`: reads words, naturals, integers, reals,
  `d/m/aaaa` dates and line remainders from a stream or a string.

Example:

    from perrera.persona import Persona
    from perrera.arbol_personas import ArbolPersonas

    arbol = ArbolPersonas()
    arbol.insertar(Persona.nueva(30, "Ana", "Pérez", 2, 5, 1990))
    arbol.insertar(Persona.nueva(10, "Luis", "Gómez", 14, 7, 1985))
    print(len(arbol), arbol.altura(), arbol.max_ci().ci)   # 2 2 30
    print(arbol.nesima(1))

## Command interpreters

Both commands read commands from the file named on the command line, or
from standard input when none is given. A numbered prompt is written
before each command; `Fin` (or the end of the input) stops the session,
`#` echoes a comment, and an unknown command prints
`Comando no reconocido.` A command used in a state that does not allow
it (printing a dog before one was created, for example) or with
malformed arguments stops the run with `error: ...` on standard error and
exit status 1.

    perrera-refugio comandos.txt

works with dates, dogs and the shelter:

    crearFecha 3/4/2024
    crearPerro 7 Toby 3 80 Perro tranquilo
    crearRefugio
    agregarEnRefugio
    imprimirRefugio
    estaEnRefugio 7
    Fin

    perrera-colecciones < comandos.txt

works with dates, dogs and people, and adds the adoption list, the
age-ordered dog list and the tree of people (commands such as
`crearPersona`, `insertarLSEAdopciones`, `crearLDEPerrosVacia`,
`insertarLDEPerros`, `insertarPersonaABBPersonas`, `alturaABBPersonas`).
The dog list must be created before use; an adoption list or tree that
was never created behaves as an empty one.

The interpreters can also be run from Python, with any text stream for
output:

    import io
    from perrera.refugio_cli import RefugioSesion

    salida = io.StringIO()
    RefugioSesion("crearFecha 1/2/2024\nimprimirFecha\nFin\n", salida).ejecutar()
    print(salida.getvalue())   # 1>2>1/2/2024
                               # 3>Fin.

`perrera.sesion.Sesion` handles the date and dog commands, and
`perrera.sesion_personas.PersonasSesion` adds the person commands; the
two command classes above build on them.

## What it does not do

Everything lives in memory for the length of one run: nothing is saved
to disk or loaded back, and the two interpreters keep no state between
runs. The shelter interpreter has no people or adoptions, and the
collections interpreter has no shelter.