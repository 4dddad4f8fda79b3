"""Read-only HTTP facade over the Dexterity contract's event logs"""

__version__ = "1.0.0"
