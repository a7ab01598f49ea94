"""Test suite for mockledger.

Organized into three categories:

1. core/: Unit tests for the engine
   - Matchers, ledger, stub table, dispatcher, quantifiers, verifier
   - Uses in-memory fakes for ports

2. adapters/: Tests for reporting adapter implementations

3. fakes/: Port implementations for testing
   - In-memory ReportingPort used by core and API tests
"""
