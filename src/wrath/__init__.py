"""wrath - dodge and shoot falling squares."""

__version__ = "0.1.0"
