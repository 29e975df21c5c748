import io

import pytest

from perrera.fecha import Fecha
from perrera.lectura import Lector


def test_palabras_across_lines():
    lector = Lector("  crearPerro  Firulais\n\n   Fin\n")
    assert [lector.palabra(), lector.palabra(), lector.palabra()] == ["crearPerro", "Firulais", "Fin"]
    with pytest.raises(EOFError):
        lector.palabra()


def test_reads_from_stream():
    lector = Lector(io.StringIO("uno dos\n"))
    assert lector.palabra() == "uno"
    assert lector.palabra() == "dos"


def test_numbers():
    lector = Lector("12 -7 +3 2.5 -0.25\n")
    assert lector.nat() == 12
    assert lector.entero() == -7
    assert lector.entero() == 3
    assert lector.real() == 2.5
    assert lector.real() == -0.25


def test_nat_rejects_negative_and_words():
    with pytest.raises(ValueError):
        Lector("-4").nat()
    with pytest.raises(ValueError):
        Lector("perro").entero()


def test_fecha():
    lector = Lector("  15/3/2024 1/12/1999\n")
    assert lector.fecha() == Fecha(15, 3, 2024)
    assert lector.fecha() == Fecha(1, 12, 1999)


def test_fecha_requires_slashes():
    with pytest.raises(ValueError):
        Lector("15-3-2024").fecha()


def test_resto_de_linea_keeps_newline():
    lector = Lector("# hola mundo\nsiguiente\n")
    assert lector.palabra() == "#"
    assert lector.resto_de_linea() == " hola mundo"
    assert lector.resto_de_linea() == ""
    assert lector.saltar_linea() == "\n"
    assert lector.palabra() == "siguiente"


def test_resto_de_linea_without_trailing_newline():
    lector = Lector("x descripcion larga")
    lector.palabra()
    assert lector.resto_de_linea() == " descripcion larga"
    with pytest.raises(EOFError):
        lector.resto_de_linea()


def test_saltar_linea_at_end_of_input():
    lector = Lector("a b\n")
    assert lector.palabra() == "a"
    assert lector.saltar_linea() == " b\n"
    assert lector.saltar_linea() == ""


def test_empty_input_raises_eof():
    with pytest.raises(EOFError):
        Lector("   \n  \n").nat()