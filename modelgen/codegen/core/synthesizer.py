"""
Declaration synthesis.

Turns a table's column descriptors into the accessor pairs of a generated
unit. Pure: the same columns always give the same unit.
"""

from typing import Iterable, Optional

from .naming import to_camel_case, to_pascal_case
from .schema import AccessorPair, BaseTypeRef, ColumnDescriptor, GeneratedUnit
from .types import map_type

DEFAULT_PREFIX = "Model"


def build_accessor(column: ColumnDescriptor, base_type: BaseTypeRef) -> AccessorPair:
    """Build the getter/setter pair for one column."""
    semantic_type, accessor_kind = map_type(column.sql_type_code)
    suffix = to_pascal_case(column.raw_name)

    return AccessorPair(
        column_name=column.raw_name,
        semantic_type=semantic_type,
        accessor_kind=accessor_kind,
        getter_name=f"get{suffix}",
        setter_name=f"set{suffix}",
        parameter_name=to_camel_case(column.raw_name),
        read_operation=base_type.read_call(accessor_kind),
        write_operation=base_type.write_call(accessor_kind),
    )


def synthesize(
    entity_name: str,
    namespace: str,
    base_type: BaseTypeRef,
    columns: Iterable[ColumnDescriptor],
    prefix: str = DEFAULT_PREFIX,
    table_name: Optional[str] = None,
) -> GeneratedUnit:
    """
    Synthesize the generated unit for a source entity.

    Args:
        entity_name: Simple name of the source entity
        namespace: Package/namespace of the source entity
        base_type: Base entity the unit builds on
        columns: Column descriptors; accessors follow their ordinal positions
        prefix: Prefix for the unit name
        table_name: Table the columns were read from

    Returns:
        Unit named ``prefix + entity_name`` in ``namespace`` with one
        accessor pair per column, in ordinal order
    """
    ordered = sorted(columns, key=lambda column: column.ordinal_position)
    accessors = tuple(build_accessor(column, base_type) for column in ordered)

    if namespace:
        source_entity = f"{namespace}.{entity_name}"
    else:
        source_entity = entity_name

    return GeneratedUnit(
        simple_name=f"{prefix}{entity_name}",
        namespace=namespace,
        base_type=base_type,
        accessors=accessors,
        source_entity=source_entity,
        table_name=table_name,
    )
