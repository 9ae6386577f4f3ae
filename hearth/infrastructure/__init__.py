"""
Infrastructure layer: configuration, logging, runtime settings and routing.
"""
