"""
Excel Download - Data Models Module

This module defines the data models used to describe a spreadsheet download
and the structures the export pipeline hands to the encoder. Pydantic models
give the caller-facing specs their validation (positive widths, the 'auto'
sentinel, callable render functions).

Key Components:
- ColumnSpec: How one output column is derived from the records
- WorksheetSpec: Records plus optional column definitions for one sheet
- WorkbookSpec: Filename and ordered worksheets for one download
- ResolvedColumn: A concrete column (id, header, width) ready for encoding
- EncodableWorksheet / EncodableWorkbook: The fully assembled structure
"""

from typing import Any, Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

# Sentinel for content-based column sizing
AUTO_WIDTH = 'auto'

Width = Union[Literal['auto'], PositiveInt, PositiveFloat]


class ColumnSpec(BaseModel):
    """
    Caller-supplied description of one output column.

    Attributes:
        key (str): Field name read from each record
        alt_key (Optional[str]): Sub-field selector for nested values (e.g. 'street1'
                                 of 'address'). Only forms the column id; picking
                                 the sub-field is the render callback's job.
        label (Optional[str]): Header text, defaults to the key
        width (Optional[Width]): Exact width or 'auto' for auto-fit
        render (Optional[Callable]): render(value, record) -> str

    Example:
        >>> ColumnSpec(key='address', alt_key='city', label='City',
        ...            render=lambda address, record: address.city)
    """
    model_config = ConfigDict(frozen=True)

    key: str
    alt_key: Optional[str] = None
    label: Optional[str] = None
    width: Optional[Width] = None
    render: Optional[Callable[[Any, Any], str]] = None

    @property
    def column_id(self) -> str:
        """Identifier of the column within its worksheet."""
        return f"{self.key}_{self.alt_key}" if self.alt_key else self.key

    @property
    def header(self) -> str:
        return self.label or self.key


class WorksheetSpec(BaseModel):
    """
    One worksheet of a download.

    When no columns are given, the columns are inferred from ``field_order`` or,
    failing that, from the first record only. Records with a different shape
    after the first are not inspected: their extra fields are dropped and
    their missing fields are written as empty cells.

    Attributes:
        records (List[Any]): Rows of the sheet, in output order
        worksheet_name (Optional[str]): Sheet title. Excel naming restrictions
                                        (31 chars, no []:*?/\\) are not enforced here.
        columns (Optional[List[ColumnSpec]]): Column definitions
        default_column_width (Optional[Width]): Width for columns without their own
        field_order (Optional[List[str]]): Explicit field order for inferred columns
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    records: List[Any] = Field(default_factory=list)
    worksheet_name: Optional[str] = None
    columns: Optional[List[ColumnSpec]] = None
    default_column_width: Optional[Width] = None
    field_order: Optional[List[str]] = None

    @property
    def has_custom_columns(self) -> bool:
        return bool(self.columns)


class WorkbookSpec(BaseModel):
    """
    A complete download request.

    Attributes:
        filename (str): Name of the file, excluding the extension
        worksheets (List[WorksheetSpec]): Sheets in tab order; at least one is
                                          required when the workbook is built
    """
    filename: str
    worksheets: List[WorksheetSpec] = Field(default_factory=list)


class ResolvedColumn(BaseModel):
    """
    A concrete spreadsheet column.

    Attributes:
        id (str): Unique key of the column within the sheet
        header (str): Header row text
        width (Optional[Union[int, float]]): Column width, None for the library default
    """
    id: str
    header: str
    width: Optional[Union[int, float]] = None


class EncodableWorksheet(BaseModel):
    """
    A worksheet ready for the encoder.

    Attributes:
        name (str): Sheet title
        columns (List[ResolvedColumn]): Columns, left to right
        rows (List[Any]): Rendered rows (Dict[str, str]) for custom columns,
                          the raw records otherwise
        custom_columns (bool): Whether rows are rendered mappings keyed by column id
        bold_header (bool): Header row font is bold
        frozen_rows (int): Number of rows kept visible while scrolling
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    columns: List[ResolvedColumn] = Field(default_factory=list)
    rows: List[Any] = Field(default_factory=list)
    custom_columns: bool = False
    bold_header: bool = True
    frozen_rows: int = 1


class EncodableWorkbook(BaseModel):
    """Container for the assembled worksheets of one download."""
    filename: str
    worksheets: List[EncodableWorksheet] = Field(default_factory=list)

    def sheet_names(self) -> List[str]:
        return [worksheet.name for worksheet in self.worksheets]


ResolvedRow = Dict[str, str]
