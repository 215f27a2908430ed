"""Attach extracted constraints to the columns they belong to."""

import logging
from typing import Iterable

from .models import Column, Constraint, Table

logger = logging.getLogger(__name__)


def index_columns(columns: Iterable[Column]) -> dict[str, Column]:
    """Build the name-keyed index used while a table is assembled."""
    return {column.name: column for column in columns}


def reconcile_constraints(index: dict[str, Column], constraints: Iterable[Constraint]) -> None:
    """Append each constraint to its owning column in ``index``.

    Constraints naming a column that is not in the index are skipped. A
    column in any unique constraint is unique, even a multi-column one.
    """
    for constraint in constraints:
        column = index.get(constraint.columnname)
        if column is None:
            logger.debug(
                f"Skipping constraint {constraint.name} on "
                f"{constraint.tablename}.{constraint.columnname}: no such column"
            )
            continue
        column.constraints.append(constraint)


def materialize_table(name: str, index: dict[str, Column]) -> Table:
    """Build the final table with columns in ordinal order."""
    columns = sorted(index.values(), key=lambda column: column.ordinal_position)
    return Table(name=name, columns=columns)
