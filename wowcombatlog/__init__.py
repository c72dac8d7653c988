"""
WoW Combat Log Parser

Decodes World of Warcraft combat log lines into a typed, immutable event
model: timestamp plus either a special (lifecycle/meta) record or a standard
prefix/advanced/suffix combat record.
"""

__version__ = "0.1.0"
__author__ = "wowcombatlog contributors"
