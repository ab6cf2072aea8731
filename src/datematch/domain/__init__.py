"""Domain layer — calendar fields, instants, zones, and reference values.

This layer depends only on stdlib.
It must never import from matchers, config, commands, or output.
"""
