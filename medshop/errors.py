"""
Common Error Constants

Centralized error messages shared by routers and services.
"""

# Auth errors
ERROR_UNAUTHORIZED = "Unauthorized"
ERROR_ADMIN_KEY_NOT_CONFIGURED = "ADMIN_API_KEY not configured"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CATEGORY_NOT_FOUND = "Category not found"

# Cart errors
ERROR_INVALID_QUANTITY = "quantity must be a positive integer"
ERROR_CART_UNAVAILABLE = "Cart service unavailable"

# Accounting errors
ERROR_INVALID_DATE_RANGE = "date_from must not be after date_to"
ERROR_EXPENSE_NOT_FOUND = "Expense not found"
