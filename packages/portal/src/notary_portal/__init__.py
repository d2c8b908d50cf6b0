"""
notary_portal — FastAPI app serving the portal's self-service widgets.

Endpoints (all wrapped in the {statusCode, message, data} envelope):
  GET  /health, /ready
  GET  /v1/fees/contract-types, /v1/fees/destinations
  POST /v1/fees/quote
  GET  /v1/chat/welcome
  POST /v1/chat/reply
  GET  /v1/booking/slots
  POST /v1/booking/preview

Run:
    notary portal serve
    uvicorn notary_portal.app:app --port 8840
"""

__version__ = "0.1.0"
