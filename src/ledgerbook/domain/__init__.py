"""Domain layer for ledgerbook application.

Services are imported from their modules (e.g. ``ledgerbook.domain.transaction``)
so that the database layer can depend on ``ledgerbook.domain.entities`` without
an import cycle.
"""
