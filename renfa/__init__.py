"""Build NFAs for literal-character patterns and flatten them into state machines."""

__version__ = "0.1.0"