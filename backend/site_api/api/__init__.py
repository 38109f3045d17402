"""API Layer: FastAPI routes, the admin gate, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are {"ok": true, ...}; error bodies are {"error": str}
"""
