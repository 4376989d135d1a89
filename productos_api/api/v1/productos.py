import logging

from fastapi import APIRouter, Depends, Response, status

from productos_api.api import convertors  # noqa: F401  registra "signed_int"
from productos_api.deps import get_dispatcher
from productos_api.schemas import (
    CreateProductoRequest,
    PatchProductoRequest,
    ProductoResponse,
    UpdateProductoRequest,
)
from productos_api.services import (
    CreateProductoCommand,
    Dispatcher,
    GetProductoByIdQuery,
)

logger = logging.getLogger("productos_api.api.productos")

router = APIRouter(prefix="/v1/api/productos", tags=["productos"])

# Contratos documentados en OpenAPI; solo 200/201/204 y el 404 del GET por id
# se producen realmente.
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"description": "Bad Request"}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Not Found"}}
_SERVER_ERROR = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Internal Server Error"}
}


@router.get(
    "",
    response_model=None,
    summary="Lista los productos",
    responses={
        status.HTTP_200_OK: {"model": list[ProductoResponse]},
        status.HTTP_204_NO_CONTENT: {"description": "No Content"},
        **_NOT_FOUND,
        **_SERVER_ERROR,
    },
)
def list_productos() -> Response:
    """Obtiene el listado de productos. Todavía no implementado: responde 200 sin cuerpo."""
    logger.info("list productos requested")
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/{producto_id:signed_int}",
    response_model=ProductoResponse,
    summary="Obtiene un producto por id",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def get_producto_by_id(
    producto_id: int,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    """Obtiene el detalle de un producto por su identificador."""
    logger.info("get producto requested | producto_id=%s", producto_id)

    result = await dispatcher.send(GetProductoByIdQuery(producto_id))

    if result is None:
        logger.warning(
            "get producto failed | producto_id=%s | reason=not_found", producto_id
        )
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return result


@router.post(
    "",
    response_model=ProductoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crea un producto",
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
)
async def create_producto(
    req: CreateProductoRequest,
    response: Response,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    """Crea un nuevo producto."""
    logger.info(
        "create producto requested | codigo=%s | categoria_id=%s",
        req.codigo,
        req.categoria_id,
    )
    command = CreateProductoCommand(
        codigo=req.codigo,
        nombre=req.nombre,
        descripcion=req.descripcion,
        precio=req.precio,
        activo=req.activo,
        categoria_id=req.categoria_id,
    )

    result = await dispatcher.send(command)

    # Created sin URI: la cabecera Location va vacía
    if result is None:
        return Response(
            status_code=status.HTTP_201_CREATED, headers={"Location": ""}
        )

    response.headers["Location"] = ""
    return result


@router.put(
    "/{producto_id:signed_int}",
    response_model=None,
    summary="Actualiza un producto",
    responses={
        status.HTTP_200_OK: {"model": ProductoResponse},
        **_BAD_REQUEST,
        **_NOT_FOUND,
        **_SERVER_ERROR,
    },
)
def update_producto(producto_id: int, req: UpdateProductoRequest) -> Response:
    """Actualiza completamente un producto existente. Todavía no implementado."""
    logger.info("update producto requested | producto_id=%s", producto_id)
    return Response(status_code=status.HTTP_200_OK)


@router.patch(
    "/{producto_id:signed_int}",
    response_model=None,
    summary="Actualiza parcialmente un producto",
    responses={
        status.HTTP_200_OK: {"model": ProductoResponse},
        **_BAD_REQUEST,
        **_NOT_FOUND,
        **_SERVER_ERROR,
    },
)
def patch_producto(producto_id: int, req: PatchProductoRequest) -> Response:
    """
    Actualiza parcialmente un producto existente.
    Solo se modificarán los campos enviados. Todavía no implementado.
    """
    logger.info(
        "patch producto requested | producto_id=%s | fields=%s",
        producto_id,
        sorted(req.model_fields_set),
    )
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{producto_id:signed_int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Elimina un producto",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
def delete_producto(producto_id: int) -> Response:
    """Elimina un producto existente. Todavía no implementado."""
    logger.info("delete producto requested | producto_id=%s", producto_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
