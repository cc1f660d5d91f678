"""Business logic services.

Services contain all catalog, query and cart logic and are called by routes.
Services are deterministic where possible and accept dependencies explicitly
(catalog, translations, locale chain, key-value store).
"""
