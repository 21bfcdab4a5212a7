"""
Company Sim - Improvement Plan Simulation Engine

A small simulation of a company whose financial and organizational metrics
are mutated by an ordered improvement plan of strategy actions such as
marketing campaigns and training programs.
"""

__version__ = "0.1.0"
__author__ = "Company Sim Team"
