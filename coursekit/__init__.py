"""Console math quiz, stone-paper-scissors game and a toolbox of small helpers."""

__version__ = "0.1.0"
__all__ = ["library", "math_game", "rps_game"]