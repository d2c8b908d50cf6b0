"""
notary_client — Async client library and CLI for the notary office backend.

Provides:
  - NotaryApiClient: httpx client with token refresh, caching and retries
  - services: typed wrappers for records, articles, listings, consultations,
    fee calculations, services and the chatbot
  - fees: the client-side notary fee calculator
  - assistant, uploads, booking, permissions: portal/admin helpers
"""

__version__ = "0.1.0"
