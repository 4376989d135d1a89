import pytest
from pydantic import ValidationError

from productos_api.schemas import (
    CreateProductoRequest,
    PatchProductoRequest,
    ProductoResponse,
)


@pytest.mark.parametrize(
    "payload",
    [
        {"Codigo": "P1", "Nombre": "W", "Precio": 1, "Activo": True, "CategoriaId": 3},
        {"codigo": "P1", "nombre": "W", "precio": 1, "activo": True, "categoriaId": 3},
        {"codigo": "P1", "nombre": "W", "precio": 1, "activo": True, "categoria_id": 3},
    ],
)
def test_create_request_accepts_field_casing(payload):
    req = CreateProductoRequest.model_validate(payload)

    assert req.categoria_id == 3
    assert req.descripcion is None


def test_create_request_requires_fields():
    with pytest.raises(ValidationError):
        CreateProductoRequest.model_validate({"Codigo": "P1"})


def test_patch_request_tracks_sent_fields():
    req = PatchProductoRequest.model_validate({"Precio": 2.5, "Activo": False})

    assert req.model_fields_set == {"precio", "activo"}
    assert req.nombre is None


def test_response_serializes_camel_case():
    producto = ProductoResponse(
        id=1,
        codigo="P1",
        nombre="Widget",
        descripcion=None,
        precio=9.99,
        activo=True,
        categoria_id=3,
    )

    assert producto.model_dump(by_alias=True) == {
        "id": 1,
        "codigo": "P1",
        "nombre": "Widget",
        "descripcion": None,
        "precio": 9.99,
        "activo": True,
        "categoriaId": 3,
    }


def test_response_from_attributes():
    class Row:
        id = 2
        codigo = "P2"
        nombre = "Tuerca"
        descripcion = "m6"
        precio = 0.1
        activo = False
        categoria_id = 8

    producto = ProductoResponse.model_validate(Row())

    assert producto.categoria_id == 8
    assert producto.descripcion == "m6"
