"""Top-level schema parsing."""

import logging
from typing import Optional

from .base.adapter import BaseAdapter
from .base.models import Schema
from .context import ParseContext, background

logger = logging.getLogger(__name__)


class SchemaParser:
    """Builds a Schema from whatever backend the adapter speaks to."""

    def __init__(self, adapter: BaseAdapter):
        self.adapter = adapter

    def parse(self, ctx: Optional[ParseContext] = None) -> Schema:
        """Extract all tables, then all enums, into a new Schema.

        Errors from any step propagate unchanged and no Schema is returned.
        """
        if ctx is None:
            ctx = background()
        tables = self.adapter.list_tables(ctx)
        enums = self.adapter.list_enums(ctx)
        logger.info(f"Parsed {len(tables)} tables and {len(enums)} enums")
        return Schema(tables=tables, enums=enums)


def parse_schema(adapter: BaseAdapter, ctx: Optional[ParseContext] = None) -> Schema:
    """Shortcut for ``SchemaParser(adapter).parse(ctx)``."""
    return SchemaParser(adapter).parse(ctx)
