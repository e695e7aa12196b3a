"""
Customer records module.

Tracks insurance customers, their contact details, and interaction history
in a flat file that is rewritten on every change.
"""
