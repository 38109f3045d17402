"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Admin routers carry require_admin as a router-level dependency
    - Routes never catch store errors; error_handlers.py maps them
"""
