"""Entry points for the demo programs."""
