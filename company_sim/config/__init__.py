"""
Configuration module.

Default strategy coefficients, YAML scenario loading and parameter validation.
"""
