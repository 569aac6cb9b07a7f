"""FastAPI/Starlette transport adapters."""
