"""
Combat system module for the combat engine.

This module handles the combat mechanics: damage formulas, monster move
tables, hero action tokens and the encounter turn-state machine.
"""
