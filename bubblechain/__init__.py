"""bubblechain - chain resolution and grid layout for note boards."""

__version__ = "0.1.0"
