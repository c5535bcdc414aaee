"""Tests del controlador (validación, despacho por tipo y reglas de negocio)."""

from __future__ import annotations

from datetime import date

import pytest

from adapters.repositorio_memoria import RepositorioMemoria
from core.domain.models import (
    Evento,
    MotoElectrica,
    Producto,
    Promocion,
    Scooter,
    Servicio,
)
from core.interfaces import ControladorProtocol
from core.services.controlador import ControladorRolaPET, generador_id_aleatorio, texto_valido


@pytest.fixture
def con_personas(controlador: ControladorRolaPET) -> ControladorRolaPET:
    assert controlador.registrar_usuario("100", "Ana", "3001111", "ana123", "ana@rolapet.co")
    assert controlador.registrar_usuario("200", "Luis", "3002222", "luis123", "luis@rolapet.co")
    assert controlador.registrar_administrador("1", "Admin", "3000000", "root", "admin@rolapet.co")
    assert controlador.registrar_proveedor("900", "Voltio", "6011234", "voltio", "contacto@voltio.co")
    return controlador


class TestUtilidades:
    def test_texto_valido(self):
        assert texto_valido("a", " b ")
        assert not texto_valido("a", "  ")
        assert not texto_valido(None)
        assert not texto_valido(5)

    def test_generador_id(self):
        generar = generador_id_aleatorio(10)
        a, b = generar(), generar()
        assert len(a) == 10
        assert a != b

    def test_controlador_por_defecto_usa_singleton(self):
        c = ControladorRolaPET()
        assert c.repositorio is RepositorioMemoria.instancia()
        assert isinstance(c, ControladorProtocol)


class TestRegistro:
    def test_registrar_usuario(self, controlador: ControladorRolaPET):
        assert controlador.registrar_usuario("100", "Ana", "300", "pw", "ana@x.co")
        assert controlador.repositorio.buscar_persona_por_cedula("100").rol == "Usuario"

    @pytest.mark.parametrize(
        "datos",
        [
            ("", "Ana", "300", "pw", "ana@x.co"),
            ("100", "  ", "300", "pw", "ana@x.co"),
            ("100", "Ana", "", "pw", "ana@x.co"),
            ("100", "Ana", "300", "", "ana@x.co"),
            ("100", "Ana", "300", "pw", "ana.x.co"),
            ("100", "Ana", "300", "pw", None),
        ],
    )
    def test_datos_invalidos(self, controlador: ControladorRolaPET, datos):
        assert not controlador.registrar_usuario(*datos)
        assert controlador.obtener_todas_las_personas() == []

    def test_cedula_duplicada_entre_roles(self, con_personas: ControladorRolaPET):
        assert not con_personas.registrar_usuario("1", "Otro", "300", "pw", "otro@x.co")
        assert not con_personas.registrar_proveedor("100", "Otro", "300", "pw", "otro@x.co")
        assert not con_personas.registrar_administrador("900", "Otro", "300", "pw", "otro@x.co")

    def test_email_duplicado_solo_para_usuarios(self, con_personas: ControladorRolaPET):
        assert not con_personas.registrar_usuario("300", "Otra", "300", "pw", "ana@rolapet.co")
        # Administradores y proveedores no verifican email.
        assert con_personas.registrar_proveedor("901", "Otro", "300", "pw", "ana@rolapet.co")

    def test_duplicados_con_espacios_externos(self, con_personas: ControladorRolaPET):
        assert not con_personas.registrar_usuario("300", "Otra", "300", "pw", " ana@rolapet.co ")
        assert not con_personas.registrar_proveedor(" 100 ", "Otro", "300", "pw", "otro@x.co")
        emails = [u.email for u in con_personas.repositorio.obtener_usuarios()]
        assert emails.count("ana@rolapet.co") == 1

    def test_sin_limite_de_longitud(self, controlador: ControladorRolaPET):
        assert controlador.registrar_usuario("100", "A" * 200, "300", "pw", "a@x.co")
        assert controlador.registrar_usuario("101", "B", "300", "pw", "@")
        assert controlador.repositorio.buscar_persona_por_cedula("100").nombre == "A" * 200


class TestAutenticacion:
    def test_usuario_por_email(self, con_personas: ControladorRolaPET):
        usuario = con_personas.autenticar_usuario("ana@rolapet.co", "ana123")
        assert usuario is not None and usuario.cedula == "100"
        assert con_personas.autenticar_usuario("ana@rolapet.co", "mal") is None
        assert con_personas.autenticar_usuario("nadie@rolapet.co", "ana123") is None

    def test_credenciales_vacias(self, con_personas: ControladorRolaPET):
        assert con_personas.autenticar_usuario("", "ana123") is None
        assert con_personas.autenticar_usuario("ana@rolapet.co", "   ") is None
        assert con_personas.autenticar_administrador(None, "root") is None

    def test_administrador_y_proveedor_por_cedula(self, con_personas: ControladorRolaPET):
        assert con_personas.autenticar_administrador("1", "root").nombre == "Admin"
        assert con_personas.autenticar_proveedor("900", "voltio").nombre == "Voltio"

    def test_credenciales_con_espacios_externos(self, con_personas: ControladorRolaPET):
        assert con_personas.autenticar_usuario("  ana@rolapet.co ", "ana123").cedula == "100"
        assert con_personas.autenticar_proveedor(" 900", "voltio").nombre == "Voltio"

    def test_rol_incorrecto(self, con_personas: ControladorRolaPET):
        assert con_personas.autenticar_administrador("900", "voltio") is None
        assert con_personas.autenticar_proveedor("1", "root") is None
        assert con_personas.autenticar_proveedor("100", "ana123") is None


class TestAmigos:
    def test_agregar_y_eliminar(self, con_personas: ControladorRolaPET):
        assert con_personas.agregar_amigo("100", "200")
        assert not con_personas.agregar_amigo("100", "200")
        assert [u.cedula for u in con_personas.obtener_amigos("100")] == ["200"]
        assert con_personas.obtener_amigos("200") == []
        assert con_personas.eliminar_amigo("100", "200")
        assert not con_personas.eliminar_amigo("100", "200")

    def test_reglas(self, con_personas: ControladorRolaPET):
        assert not con_personas.agregar_amigo("100", "100")
        assert not con_personas.agregar_amigo(None, "200")
        assert not con_personas.agregar_amigo("100", "1")  # administrador
        assert not con_personas.agregar_amigo("100", "999")
        assert con_personas.obtener_amigos("900") == []


class TestVehiculos:
    @pytest.mark.parametrize(
        "tipo, clase",
        [
            ("scooter", Scooter),
            ("SCOOTER", Scooter),
            ("moto", MotoElectrica),
            ("moto electrica", MotoElectrica),
            ("Moto Eléctrica", MotoElectrica),
        ],
    )
    def test_despacho_por_tipo(self, controlador: ControladorRolaPET, tipo, clase):
        vehiculo = controlador.crear_vehiculo("Marca", "Modelo", 40, tipo)
        assert isinstance(vehiculo, clase)
        assert vehiculo.id == "id1"
        assert controlador.obtener_todos_los_vehiculos() == [vehiculo]

    @pytest.mark.parametrize(
        "marca, modelo, autonomia, tipo",
        [
            ("", "M", 10, "scooter"),
            ("X", "M", 0, "scooter"),
            ("X", "M", -5, "scooter"),
            ("X", "M", 10, "bicicleta"),
            ("X", "M", "10", "scooter"),
            ("X", "M", True, "scooter"),
        ],
    )
    def test_vehiculo_invalido(self, controlador: ControladorRolaPET, marca, modelo, autonomia, tipo):
        assert controlador.crear_vehiculo(marca, modelo, autonomia, tipo) is None
        assert controlador.obtener_todos_los_vehiculos() == []

    def test_agregar_a_usuario(self, con_personas: ControladorRolaPET):
        v = con_personas.crear_vehiculo("Xiaomi", "M365", 30, "scooter")
        assert con_personas.agregar_vehiculo_a_usuario("100", v)
        assert not con_personas.agregar_vehiculo_a_usuario("100", v)
        assert con_personas.consultar_vehiculos_de_usuario("100") == [v]
        assert not con_personas.agregar_vehiculo_a_usuario("900", v)
        assert not con_personas.agregar_vehiculo_a_usuario("100", None)
        assert con_personas.consultar_vehiculos_de_usuario("900") == []

    def test_agregar_guarda_en_repositorio(self, con_personas: ControladorRolaPET):
        v = Scooter(id="externo", marca="a", modelo="b", autonomia_km=5)
        assert con_personas.agregar_vehiculo_a_usuario("100", v)
        assert con_personas.repositorio.buscar_vehiculo_por_id("externo") is v

    def test_eliminar_de_usuario_y_repositorio(self, con_personas: ControladorRolaPET):
        v = con_personas.crear_vehiculo("Xiaomi", "M365", 30, "scooter")
        con_personas.agregar_vehiculo_a_usuario("100", v)
        assert not con_personas.eliminar_vehiculo_de_usuario("200", v.id)
        assert con_personas.eliminar_vehiculo_de_usuario("100", v.id)
        assert con_personas.consultar_vehiculos_de_usuario("100") == []
        assert con_personas.obtener_todos_los_vehiculos() == []
        assert not con_personas.eliminar_vehiculo_de_usuario("100", v.id)
        assert not con_personas.eliminar_vehiculo_de_usuario("100", None)


class TestItems:
    def test_crear_y_asignar(self, con_personas: ControladorRolaPET):
        servicio = con_personas.crear_item("Revisión", "General", "servicio")
        producto = con_personas.crear_item("Casco", "Certificado", "Producto")
        assert isinstance(servicio, Servicio)
        assert isinstance(producto, Producto)
        assert con_personas.agregar_item_a_proveedor("900", servicio)
        assert not con_personas.agregar_item_a_proveedor("900", servicio)
        assert not con_personas.agregar_item_a_proveedor("100", producto)
        assert con_personas.obtener_items_de_proveedor("900") == [servicio]
        assert con_personas.obtener_items_de_proveedor("100") == []
        assert len(con_personas.obtener_todos_los_items()) == 2

    def test_invalidos(self, controlador: ControladorRolaPET):
        assert controlador.crear_item("", "d", "servicio") is None
        assert controlador.crear_item("n", "d", "alquiler") is None
        assert controlador.obtener_todos_los_items() == []

    def test_eliminar_de_proveedor(self, con_personas: ControladorRolaPET):
        item = con_personas.crear_item("Casco", "Certificado", "producto")
        con_personas.agregar_item_a_proveedor("900", item)
        assert con_personas.eliminar_item_de_proveedor("900", item.id)
        assert con_personas.obtener_items_de_proveedor("900") == []
        assert con_personas.obtener_todos_los_items() == []
        assert not con_personas.eliminar_item_de_proveedor("900", item.id)


class TestPublicaciones:
    def test_crear(self, controlador: ControladorRolaPET):
        evento = controlador.crear_publicacion("Rodada", "Viernes", "evento")
        promo = controlador.crear_publicacion("2x1", "Octubre", "promoción")
        assert isinstance(evento, Evento)
        assert isinstance(promo, Promocion)
        assert evento.fecha_creacion == date.today()
        assert controlador.crear_publicacion("t", "d", "noticia") is None
        assert controlador.crear_publicacion("t", " ", "evento") is None

    def test_asignar_y_eliminar(self, con_personas: ControladorRolaPET):
        pub = con_personas.crear_publicacion("Rodada", "Viernes", "evento")
        assert con_personas.agregar_publicacion_a_proveedor("900", pub)
        assert not con_personas.agregar_publicacion_a_proveedor("900", pub)
        assert not con_personas.agregar_publicacion_a_proveedor("1", pub)
        assert con_personas.obtener_publicaciones_de_proveedor("900") == [pub]
        assert con_personas.eliminar_publicacion_de_proveedor("900", pub.id)
        assert con_personas.obtener_todas_las_publicaciones() == []


class TestConsultas:
    def test_estadisticas(self, con_personas: ControladorRolaPET):
        v = con_personas.crear_vehiculo("Xiaomi", "M365", 30, "scooter")
        con_personas.agregar_vehiculo_a_usuario("100", v)
        texto = con_personas.obtener_estadisticas_sistema()
        assert "Personas: 4" in texto
        assert "Usuarios: 2" in texto
        assert "Administradores: 1" in texto
        assert "Proveedores: 1" in texto
        assert "Vehículos: 1" in texto

    def test_modelo_de_estadisticas(self, con_personas: ControladorRolaPET):
        stats = con_personas.estadisticas_sistema()
        assert stats.personas == 4
        assert stats.formatear() == con_personas.obtener_estadisticas_sistema()

    def test_exportar_snapshot(self, con_personas: ControladorRolaPET, tmp_path):
        path = con_personas.exportar_snapshot(tmp_path / "snap.json")
        assert path.is_file()
        assert '"personas": 4' in path.read_text(encoding="utf-8")
