from shaffuru.core.move import (
    FACES,
    MODIFIERS,
    Face,
    Modifier,
    Move,
    opposite,
    render,
    sample_face,
    sample_modifier,
    sample_move,
)

__all__ = [
    "FACES",
    "MODIFIERS",
    "Face",
    "Modifier",
    "Move",
    "opposite",
    "render",
    "sample_face",
    "sample_modifier",
    "sample_move",
]
