"""
input_frame.py
--------------
Immutable snapshot of the logical actions for one frame.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InputFrame:
    """Direction holds plus the rising edges of fire and cancel."""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False
    cancel: bool = False

    @property
    def axis(self):
        """(x, y) movement axes, each in {-1, 0, 1}. Not normalized."""
        return (int(self.right) - int(self.left), int(self.down) - int(self.up))

