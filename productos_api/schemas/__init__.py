from .productos import (
    CreateProductoRequest,
    PatchProductoRequest,
    ProductoResponse,
    UpdateProductoRequest,
)

__all__ = [
    "CreateProductoRequest",
    "UpdateProductoRequest",
    "PatchProductoRequest",
    "ProductoResponse",
]
