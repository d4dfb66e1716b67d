"""
Runtime configuration read from the environment.

Values are read once at import; tests patch module attributes or set
the environment before importing.
"""

import os

# Managed backend (Supabase / PostgREST)
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")

# Upstash Redis, used only when CART_STORAGE_BACKEND=redis
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# Cart persistence
CART_STORAGE_BACKEND = os.environ.get("CART_STORAGE_BACKEND", "file").lower()  # memory | file | redis
CART_STORAGE_DIR = os.environ.get("CART_STORAGE_DIR", ".cart")
CART_STORAGE_KEY = os.environ.get("CART_STORAGE_KEY", "cart")
CART_SESSION_COOKIE = "cart_session"

# Storefront
STORE_CURRENCY = os.environ.get("STORE_CURRENCY", "USD").upper()
PRODUCTS_PER_PAGE = 12

# Admin
ADMIN_API_KEY = os.environ.get("ADMIN_API_KEY", "")

# CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
