"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants and unit conversions
- exceptions: Custom exception hierarchy
"""
