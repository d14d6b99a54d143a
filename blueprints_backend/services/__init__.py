"""Service layer package housing the blueprint business operations.

Routes talk to ``BlueprintsService``; it talks to a persistence adapter.
"""
