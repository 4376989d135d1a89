"""
Fixtures compartidos de la suite de tests.
"""

import os

import pytest

# Variables de entorno antes de importar la aplicación
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.pop("HANDLERS_MODULE", None)

from httpx import ASGITransport, AsyncClient  # noqa: E402

from productos_api.main import create_app  # noqa: E402
from productos_api.schemas import ProductoResponse  # noqa: E402
from productos_api.services import Dispatcher  # noqa: E402


@pytest.fixture
def dispatcher():
    """Despachador vacío; cada test registra sus handlers."""
    return Dispatcher()


@pytest.fixture
def app(dispatcher):
    return create_app(dispatcher)


@pytest.fixture
def app_client(app):
    """Cliente HTTP sobre la app FastAPI."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def producto_payload():
    return {
        "Codigo": "P1",
        "Nombre": "Widget",
        "Descripcion": "d",
        "Precio": 9.99,
        "Activo": True,
        "CategoriaId": 3,
    }


@pytest.fixture
def producto_response():
    return ProductoResponse(
        id=7,
        codigo="P1",
        nombre="Widget",
        descripcion="d",
        precio=9.99,
        activo=True,
        categoria_id=3,
    )


@pytest.fixture
def producto_json():
    return {
        "id": 7,
        "codigo": "P1",
        "nombre": "Widget",
        "descripcion": "d",
        "precio": 9.99,
        "activo": True,
        "categoriaId": 3,
    }
