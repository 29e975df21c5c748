import pytest

from perrera.fecha import Fecha
from perrera.perro import Perro
from perrera.refugio import MAX_PERROS, Refugio


def hacer_perro(id_perro, dia=1, mes=1, anio=2020, edad=3):
    return Perro(id_perro, f"Perro{id_perro}", edad, 50, "manso", Fecha(dia, mes, anio))


def test_agregar_ordena_por_fecha_y_estable():
    refugio = Refugio()
    refugio.agregar(hacer_perro(1, anio=2020))
    refugio.agregar(hacer_perro(2, anio=2019))
    refugio.agregar(hacer_perro(3, anio=2020))
    refugio.agregar(hacer_perro(4, dia=5, anio=2019))
    assert [p.id for p in refugio] == [2, 4, 1, 3]
    fechas = [p.fecha_ingreso for p in refugio]
    assert fechas == sorted(fechas)


def test_capacidad_maxima():
    refugio = Refugio()
    for i in range(MAX_PERROS):
        assert refugio.agregar(hacer_perro(i))
    assert refugio.agregar(hacer_perro(999)) is False
    assert len(refugio) == MAX_PERROS
    assert 999 not in refugio


def test_contains_y_obtener():
    refugio = Refugio()
    perro = hacer_perro(7)
    refugio.agregar(perro)
    assert 7 in refugio
    assert 8 not in refugio
    assert refugio.obtener(7) is perro
    with pytest.raises(KeyError):
        refugio.obtener(8)


def test_ingresaron_en():
    refugio = Refugio()
    assert refugio.ingresaron_en(Fecha(1, 1, 2020)) is False
    for i, anio in enumerate([2018, 2019, 2020, 2021, 2022]):
        refugio.agregar(hacer_perro(i, anio=anio))
    for anio in [2018, 2019, 2020, 2021, 2022]:
        assert refugio.ingresaron_en(Fecha(1, 1, anio))
    assert refugio.ingresaron_en(Fecha(2, 1, 2020)) is False
    assert refugio.ingresaron_en(Fecha(1, 1, 2017)) is False
    assert refugio.ingresaron_en(Fecha(1, 1, 2030)) is False


def test_perros_en_respeta_orden_de_ingreso():
    refugio = Refugio()
    refugio.agregar(hacer_perro(1, anio=2021))
    refugio.agregar(hacer_perro(2, anio=2020))
    refugio.agregar(hacer_perro(3, anio=2021))
    assert [p.id for p in refugio.perros_en(Fecha(1, 1, 2021))] == [1, 3]
    assert refugio.perros_en(Fecha(1, 1, 1999)) == []


def test_remover():
    refugio = Refugio()
    for i in range(1, 4):
        refugio.agregar(hacer_perro(i, dia=i))
    removido = refugio.remover(2)
    assert removido.id == 2
    assert [p.id for p in refugio] == [1, 3]
    with pytest.raises(KeyError):
        refugio.remover(2)


def test_str():
    refugio = Refugio()
    assert str(refugio) == ""
    perro = hacer_perro(5)
    refugio.agregar(perro)
    assert str(refugio) == str(perro)
    assert str(refugio).startswith("Perro 5\n")