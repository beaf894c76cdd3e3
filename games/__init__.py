"""Games built on the catcher framework."""
