"""Services Layer: repositories wrapping the query builder.

Invariants:
    - Routes never build SQL; they call repository methods
    - Repositories never raise HTTP errors; routes map results to status codes
"""
