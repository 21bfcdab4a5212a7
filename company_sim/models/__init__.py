"""
Data models module.

Mutable metrics record owned by a company and mutated in place by strategies.
"""
