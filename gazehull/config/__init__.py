"""
Configuration package.

Provides application defaults and logging configuration. For algorithmic
constants, see the gazehull.constants module.
"""
