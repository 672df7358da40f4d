"""
Application layer.

Use cases orchestrate the domain: they run validation pipelines, call
the repository port and map persistence records to domain objects.
"""
