"""Data stores for persistence and document loading.

Stores handle:
- Key-value persistence for carts (Redis, or in-memory fallback)
- Loading static catalog / i18n documents (local files or HTTP)

No business logic in stores - that belongs in services.
"""
