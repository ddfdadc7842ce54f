"""Card catalogue, deck management, seating, turn flow and table markers for a Wild West card game."""

__version__ = "0.1.0"