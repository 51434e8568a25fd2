"""Tabletop geometry for a fixed 5x5 table."""


BOARD_SIZE = 5


def _is_cell_index(value: int | float) -> bool:
    """Whole number in [0, BOARD_SIZE)."""
    if isinstance(value, float) and not value.is_integer():
        return False  # also covers nan and inf
    return 0 <= value < BOARD_SIZE


def is_on_board(x: int | float, y: int | float) -> bool:
    """Check if (x, y) is a cell of the table.

    (0, 0) is the south-west corner; x grows east, y grows north.

    Args:
        x: Column, 0 = west edge
        y: Row, 0 = south edge

    Returns:
        True if both coordinates are whole numbers inside the table
    """
    return _is_cell_index(x) and _is_cell_index(y)
