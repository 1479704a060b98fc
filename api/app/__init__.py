"""Bond analysis HTTP API (FastAPI + Strawberry GraphQL)."""
