"""Prun Tools: a dashboard over FIO game-economy data."""
