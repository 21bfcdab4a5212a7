"""
Data ingestion module.

Normalizes raw scenario data into strategy variants and metric values.
"""
