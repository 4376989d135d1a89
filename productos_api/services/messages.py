from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GetProductoByIdQuery:
    id: int


@dataclass(frozen=True)
class CreateProductoCommand:
    codigo: str
    nombre: str
    descripcion: Optional[str]
    precio: float
    activo: bool
    categoria_id: int
