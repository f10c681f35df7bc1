"""
Invoice Form: a Reflex application for building, saving and sharing invoices.

The form keeps its whole state in a single invoice-data mapping that can be
persisted locally or packed into a share URL and reopened on another machine.

Subpackages:
- sharing: Key-compression codec and share-link transport
- models: Invoice dataclasses and closed vocabularies
- services: Local storage and the form service (load chain, sharing, profiles)
- utils: Item/total arithmetic, date helpers and display formatting
- data: Hard-coded default invoice
- components: Reflex UI components

Main entry points:
- app.main(): Start the development server
- cli.main(): Command line tool for the compression map and share URLs
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
