"""
InsuraPro - Customer Relationship Management

Single-user CRM for an insurance agency, backed by a flat customer file.

Modules:
    core        - Shared services (config, logging, paths, output)
    customers   - Customer records, validation, file store, menu and commands
    cli         - Top-level command-line entry point
"""

__version__ = "0.1.0"
