"""Configuration layer — logging setup and command-line settings.

Only the CLI uses this layer; importing the library never configures logging.
"""
