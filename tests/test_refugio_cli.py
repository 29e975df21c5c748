import io

import pytest

from perrera.fecha import Fecha
from perrera.refugio_cli import RefugioSesion, main
from perrera.sesion import SesionError

DOS_PERROS = (
    "crearRefugio\n"
    "crearFecha 10/1/2020\n"
    "crearPerro 1 Rex 2 50 Grande\n"
    "agregarEnRefugio\n"
    "crearFecha 5/1/2020\n"
    "crearPerro 2 Luna 3 70 Chica\n"
    "agregarEnRefugio\n"
)


def correr(texto):
    salida = io.StringIO()
    sesion = RefugioSesion(texto, salida)
    sesion.ejecutar()
    return salida.getvalue(), sesion


def test_agregar_ordena_por_fecha_de_ingreso():
    _, sesion = correr(DOS_PERROS + "Fin\n")
    assert [perro.id for perro in sesion.refugio] == [2, 1]
    assert sesion.perro is None


def test_imprimir_refugio_en_orden():
    salida, sesion = correr(DOS_PERROS + "imprimirRefugio\nFin\n")
    perros = list(sesion.refugio)
    assert "\n".join(str(perro) for perro in perros) + "\n" in salida
    assert salida.index("Perro 2") < salida.index("Perro 1")


def test_imprimir_refugio_vacio_no_imprime():
    salida, _ = correr("crearRefugio\nimprimirRefugio\nFin\n")
    assert salida == "1>2>3>Fin.\n"


def test_esta_en_refugio():
    salida, _ = correr(DOS_PERROS + "estaEnRefugio 1\nestaEnRefugio 9\nFin\n")
    assert "El perro con id 1 esta en el refugio.\n" in salida
    assert "El perro con id 9 NO esta en el refugio.\n" in salida


def test_obtener_de_refugio():
    salida, sesion = correr(DOS_PERROS + "obtenerDeRefugio 1\nFin\n")
    assert str(sesion.refugio.obtener(1)) + "\n" in salida


def test_obtener_ausente_falla():
    with pytest.raises(SesionError):
        correr(DOS_PERROS + "obtenerDeRefugio 9\nFin\n")


def test_ingresaron_perros_en_fecha():
    salida, sesion = correr(DOS_PERROS + "ingresaronPerrosFechaRefugio 5/1/2020\nFin\n")
    assert str(sesion.refugio.obtener(2)) in salida
    assert "Perro 1\n" not in salida


def test_no_ingresaron_perros_en_fecha():
    salida, _ = correr(DOS_PERROS + "ingresaronPerrosFechaRefugio 7/7/2020\nFin\n")
    assert "No se encontraron perros ingresados en la fecha determinada.\n" in salida


def test_imprimir_perros_fecha_sin_coincidencias():
    salida, sesion = correr(DOS_PERROS + "imprimirPerrosFechaRefugio 7/7/2020\nFin\n")
    assert sesion.refugio.perros_en(Fecha(7, 7, 2020)) == []
    assert "Perro" not in salida


def test_remover_de_refugio():
    salida, sesion = correr(DOS_PERROS + "removerDeRefugio 1\nremoverDeRefugio 1\nFin\n")
    assert "El perro con id 1 se removió del refugio.\n" in salida
    assert "El perro con id 1 NO está en el refugio.\n" in salida
    assert [perro.id for perro in sesion.refugio] == [2]


def test_agregar_sin_perro_falla():
    with pytest.raises(SesionError):
        correr("crearRefugio\nagregarEnRefugio\nFin\n")


def test_liberar_refugio():
    _, sesion = correr(DOS_PERROS + "liberarRefugio\nFin\n")
    assert sesion.refugio is None


def test_comandos_base_siguen_disponibles():
    salida, _ = correr("crearFecha 5/6/2021\nimprimirFecha\nFin\n")
    assert salida == "1>2>5/6/2021\n3>Fin.\n"


def test_main_con_archivo(tmp_path, capsys):
    archivo = tmp_path / "comandos.in"
    archivo.write_text(DOS_PERROS + "estaEnRefugio 2\nFin\n", encoding="utf-8")
    assert main([str(archivo)]) == 0
    salida = capsys.readouterr().out
    assert salida.startswith("1>")
    assert "El perro con id 2 esta en el refugio.\n" in salida
    assert salida.endswith("Fin.\n")


def test_main_con_entrada_estandar(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Fin\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1>Fin.\n"


def test_main_informa_error(tmp_path, capsys):
    archivo = tmp_path / "comandos.in"
    archivo.write_text("imprimirRefugio\nFin\n", encoding="utf-8")
    assert main([str(archivo)]) == 1
    assert "error" in capsys.readouterr().err