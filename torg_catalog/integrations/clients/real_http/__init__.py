"""
Real HTTP catalog transport.

Important:
- Must implement the same interface as the mock transport
- This is the ONLY place where catalog HTTP calls are made
"""
