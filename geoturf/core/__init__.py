"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (earth radius, units, circle defaults)
- exceptions: Custom exception hierarchy
"""
