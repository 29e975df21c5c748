import pytest

from perrera.adopciones import ListaAdopciones
from perrera.fecha import Fecha
from perrera.perro import Perro
from perrera.persona import Persona


def hacer_persona(ci):
    return Persona.nueva(ci, "Ana", "Gomez", 3, 4, 1990)


def hacer_perro(id_perro):
    return Perro(id_perro, "Toby", 2, 80, "juguetón", Fecha(10, 6, 2021))


def test_lista_nueva_vacia():
    lista = ListaAdopciones()
    assert len(lista) == 0
    assert list(lista) == []
    assert str(lista) == ""


def test_insertar_ordena_por_fecha_y_estable():
    lista = ListaAdopciones()
    lista.insertar(Fecha(1, 1, 2022), hacer_persona(1), hacer_perro(10))
    lista.insertar(Fecha(1, 1, 2020), hacer_persona(2), hacer_perro(20))
    lista.insertar(Fecha(1, 1, 2022), hacer_persona(3), hacer_perro(30))
    lista.insertar(Fecha(1, 1, 2021), hacer_persona(4), hacer_perro(40))
    assert [a.persona.ci for a in lista] == [2, 4, 1, 3]
    fechas = [a.fecha for a in lista]
    assert fechas == sorted(fechas)


def test_existe():
    lista = ListaAdopciones()
    lista.insertar(Fecha(1, 1, 2022), hacer_persona(1), hacer_perro(10))
    assert lista.existe(1, 10)
    assert not lista.existe(1, 11)
    assert not lista.existe(2, 10)


def test_remover():
    lista = ListaAdopciones()
    lista.insertar(Fecha(1, 1, 2020), hacer_persona(1), hacer_perro(10))
    lista.insertar(Fecha(1, 1, 2021), hacer_persona(2), hacer_perro(20))
    lista.insertar(Fecha(1, 1, 2022), hacer_persona(3), hacer_perro(30))
    removida = lista.remover(2, 20)
    assert removida.perro.id == 20
    assert [a.persona.ci for a in lista] == [1, 3]
    lista.remover(1, 10)
    assert [a.persona.ci for a in lista] == [3]
    with pytest.raises(KeyError):
        lista.remover(1, 10)


def test_formato_de_adopcion():
    lista = ListaAdopciones()
    adopcion = lista.insertar(Fecha(1, 2, 2020), hacer_persona(7), hacer_perro(9))
    lineas = str(adopcion).split("\n")
    assert lineas[0] == "---------------------------"
    assert lineas[-1] == "---------------------------"
    assert lineas[1] == "Adopcion en fecha 1/2/2020"
    assert lineas[2] == "Adoptante:"
    assert lineas[3] == "Persona Ana Gomez"
    assert lineas[4] == "CI: 7"
    assert lineas[5] == "Adoptado:"
    assert lineas[6] == "Perro 9"
    assert lineas[7] == "Nombre: Toby"
    assert lineas[8] == "Fecha de ingreso: 10/6/2021"
    assert str(lista) == str(adopcion)