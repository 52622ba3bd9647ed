"""Difficulty to board-size policy for the web front end."""

DEFAULT_DIMENSIONS: tuple[int, int] = (6, 7)

# difficulty -> (rows, cols)
DIFFICULTIES: dict[str, tuple[int, int]] = {
    "easy": (6, 7),
    "normal": (6, 9),
    "hard": (7, 8),
}


def dimensions_for(difficulty: str | None) -> tuple[int, int]:
    """Map a difficulty name to (rows, cols); unknown names get the easy board."""
    key = (difficulty or "").strip().lower()
    return DIFFICULTIES.get(key, DEFAULT_DIMENSIONS)
