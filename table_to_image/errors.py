# table_to_image/errors.py


class TableConversionError(Exception):
    """Base class for errors that reject a single conversion request."""


class UnsupportedFormatError(TableConversionError):
    def __init__(self, message: str = "Unsupported table format"):
        super().__init__(message)


class TableTooLargeError(TableConversionError):
    def __init__(self, cell_count: int, max_cells: int):
        self.cell_count = cell_count
        self.max_cells = max_cells
        super().__init__(f"Table too large (max {max_cells} cells)")
