from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wordle_game.engine import BoardSnapshot, Mark, RowSnapshot

TILE_STYLES = {
    Mark.HIT: "bold black on green",
    Mark.CONTAINS: "bold black on yellow",
    Mark.MISS: "black on white",
    Mark.UNKNOWN: None,
}


def render_row(row: RowSnapshot) -> Text:
    text = Text("|")
    for char, mark in zip(row.text, row.marks):
        text.append(char, style=TILE_STYLES[mark])
        text.append("|")
    return text


def render_board(snapshot: BoardSnapshot, title: str = "Wordle") -> Group:
    """
    Builds the board with the tries left and the error of the last submission underneath it.

    Args:
        snapshot (BoardSnapshot): The state of the game to draw.
        title (str, optional): Panel title. Defaults to "Wordle".

    Returns:
        Group: A renderable for rich consoles.
    """

    separator = "-" * (snapshot.width * 2 + 1)

    board = Table.grid()
    board.add_column(justify="left")
    for row in snapshot.rows:
        board.add_row(separator)
        board.add_row(render_row(row))
    board.add_row(separator)

    tries = f"{snapshot.tries_left} {'try' if snapshot.tries_left == 1 else 'tries'} left"
    parts = [Panel.fit(board, title=title, border_style="green"), Text(tries, style="dim")]
    if snapshot.last_error is not None:
        parts.append(Text(str(snapshot.last_error), style="bold red"))
    return Group(*parts)


def draw(console: Console, snapshot: BoardSnapshot) -> None:
    console.clear()
    console.print(render_board(snapshot))
