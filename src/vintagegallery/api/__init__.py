"""Remote record store access.

Modules
-------
models
    Pydantic models for the ``/api/art`` JSON contract.
client
    Async httpx client for the two store endpoints.
"""
