"""External adapters for the mockledger engine.

Adapter Organization:

- reporting/: Implementations of ReportingPort (in-memory recording,
  logging, assertion errors)
"""
