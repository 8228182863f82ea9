"""Domain layer for mefirst.

Pure budgeting computations (payday, periods, allocation, aggregates, impulse)
and the services that validate and persist records. Import services from their
modules, e.g. ``from mefirst.domain.transaction import TransactionService``.
"""
