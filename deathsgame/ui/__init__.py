"""
User interface module for the combat engine.

This module provides the console action source: menus, prompts and the
formatting of player choices.
"""
