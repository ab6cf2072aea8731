"""Matcher layer — comparison engine, matcher objects, and factories.

Matchers may import from the domain layer.
They must never import from commands, config, or output.
"""
