"""Knuth-Bendix completion over flat prefix-encoded words."""
