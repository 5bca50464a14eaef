"""Building blocks for a small 2D role-playing game: scenes and components,
sprites and text, animation graphs, audio mixing and input mapping."""

__version__ = "0.1.0"