from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for Sheets API resources (snake_case in Python, camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, object]:
        """Return the API payload, omitting unset (unbounded) fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, *, pretty: bool = False, indent: int | None = None) -> str:
        """
        Serialize the resource into JSON text using API field names.
        """
        indent_val = 2 if pretty and indent is None else indent
        return json.dumps(self.to_payload(), ensure_ascii=False, indent=indent_val)


class SheetProperties(ApiModel):
    """Properties of a sheet within a spreadsheet."""

    sheet_id: int | None = Field(default=None, ge=0, description="Numeric sheet id.")
    title: str = Field(description="Sheet name as shown on the tab.")


class Sheet(ApiModel):
    """A sheet within a spreadsheet."""

    properties: SheetProperties = Field(description="Sheet properties.")


class GridRange(ApiModel):
    """Rectangular range on a sheet; end indexes are exclusive, None is unbounded."""

    sheet_id: int | None = Field(default=None, ge=0, description="Sheet id.")
    start_row_index: int | None = Field(
        default=None, ge=0, description="Start row (zero-based, inclusive)."
    )
    end_row_index: int | None = Field(
        default=None, ge=0, description="End row (zero-based, exclusive)."
    )
    start_column_index: int | None = Field(
        default=None, ge=0, description="Start column (zero-based, inclusive)."
    )
    end_column_index: int | None = Field(
        default=None, ge=0, description="End column (zero-based, exclusive)."
    )


class GridCoordinate(ApiModel):
    """A single cell position on a sheet."""

    sheet_id: int | None = Field(default=None, ge=0, description="Sheet id.")
    row_index: int | None = Field(default=None, ge=0, description="Row (zero-based).")
    column_index: int | None = Field(
        default=None, ge=0, description="Column (zero-based)."
    )


__all__ = [
    "ApiModel",
    "GridCoordinate",
    "GridRange",
    "Sheet",
    "SheetProperties",
]
