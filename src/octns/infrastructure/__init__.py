"""Infrastructure layer: registry HTTP client and ledger contract.

This layer depends on stdlib and third-party libs (httpx).
It must never import from services, commands, or output.
"""
