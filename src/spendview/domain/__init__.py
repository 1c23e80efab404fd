"""Domain layer for spendview application.

Submodules are imported directly (``spendview.domain.aggregation`` etc.);
the database layer depends on ``spendview.domain.entities``, so this package
does not import services eagerly.
"""
