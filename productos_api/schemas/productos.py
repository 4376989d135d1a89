from typing import Optional

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel, to_pascal


def _input_aliases(name: str) -> AliasChoices:
    # acepta categoriaId, CategoriaId y categoria_id
    return AliasChoices(to_camel(name), to_pascal(name), name)


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(
            validation_alias=_input_aliases,
            serialization_alias=to_camel,
        ),
        populate_by_name=True,
    )


class CreateProductoRequest(ApiModel):
    codigo: str
    nombre: str
    descripcion: Optional[str] = None
    precio: float
    activo: bool
    categoria_id: int


class UpdateProductoRequest(ApiModel):
    codigo: str
    nombre: str
    descripcion: Optional[str] = None
    precio: float
    activo: bool
    categoria_id: int


class PatchProductoRequest(ApiModel):
    codigo: Optional[str] = None
    nombre: Optional[str] = None
    descripcion: Optional[str] = None
    precio: Optional[float] = None
    activo: Optional[bool] = None
    categoria_id: Optional[int] = None


class ProductoResponse(ApiModel):
    id: int
    codigo: str
    nombre: str
    descripcion: Optional[str] = None
    precio: float
    activo: bool
    categoria_id: int

    model_config = ConfigDict(from_attributes=True)
