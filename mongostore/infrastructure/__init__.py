"""
Infrastructure Layer
===================

External concerns and framework-specific implementations.
This layer depends on the domain layer but not vice versa.

Contains:
- Database implementations (MongoDB connection and record store)
"""
