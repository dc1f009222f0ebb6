"""Core of the mylang pipeline: IR, errors, configuration and the expression engine."""
