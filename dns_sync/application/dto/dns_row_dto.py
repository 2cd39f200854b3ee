"""
Esquemas explicitos de las filas leidas desde las vistas de DNS.

Las columnas deben existir en cada fila (aunque su valor sea NULL);
una columna faltante o con un tipo incompatible se reporta como
SchemaMismatchException en lugar de propagarse como None.
"""
from decimal import Decimal
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dns_sync.shared.exceptions.sync import SchemaMismatchException


class AccessoryRowDTO(BaseModel):
    """Fila de la vista de accesorios con stock por bodega."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    codigo: str = Field(..., description="Codigo del accesorio en DNS")
    bodega: Optional[str] = Field(..., description="Codigo de bodega")
    des_bodega: Optional[str] = Field(..., description="Descripcion de la bodega")
    descripcion: Optional[str] = Field(..., description="Descripcion del accesorio")
    valor_unitario_sin_iva: Optional[Decimal] = Field(..., description="Precio unitario sin IVA")
    valorconiva: Optional[Decimal] = Field(..., description="Precio con IVA")
    stock: Optional[int] = Field(..., description="Existencias en la bodega (NULL cuenta como 0)")


class MaintenanceRowDTO(BaseModel):
    """Fila de la vista de planes de mantenimiento."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore", populate_by_name=True)

    id: int = Field(..., alias="id_plan_mantenimiento_enca", description="ID del plan en DNS")
    modelo: Optional[str] = Field(..., description="Modelo del vehiculo")
    ano: Optional[int] = Field(..., description="Año del modelo")
    descripcion: Optional[str] = Field(..., alias="DESCRIPCION", description="Descripcion del plan")
    kilometraje: Optional[int] = Field(..., description="Kilometraje del mantenimiento")
    notas: Optional[str] = Field(..., description="Operaciones incluidas")
    precio: Optional[Decimal] = Field(..., description="Precio del plan")


RowModel = TypeVar("RowModel", bound=BaseModel)


def decode_row(model: Type[RowModel], row: Mapping[str, Any], *, source: str) -> RowModel:
    """
    Valida una fila cruda contra su esquema.

    Raises:
        SchemaMismatchException: si falta una columna o un valor no es convertible
    """
    try:
        return model.model_validate(dict(row))
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise SchemaMismatchException(source, errors, row=dict(row)) from e
