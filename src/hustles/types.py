"""Shared types for the hustles package."""

CellValue = float | bool | str
Record = dict[str, CellValue]
Dataset = list[Record]
