"""
Domain Layer
============

Core record store contracts and models.
This layer has no dependencies on infrastructure.

Contains:
- Models: Record and AggregateDocument
- Repository Interfaces: Abstract contract for record persistence
- Errors: Failure taxonomy shared by all implementations
"""
