"""shaffuru: generador de scrambles aleatorios para el cubo Rubik 3x3."""

__version__ = "0.1.0"
