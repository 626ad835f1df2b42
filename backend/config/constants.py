# backend/config/constants.py

# -----------------------------
# SESSION COOKIE
# -----------------------------

TOKEN_COOKIE_NAME = "token"
COOKIE_PATH = "/"

# -----------------------------
# ROLES / SELLER PROMOTION
# -----------------------------

DEFAULT_ROLE = "customer"
DEFAULT_STATUS = "none"

# fields a client may never set through the login profile
PROTECTED_USER_FIELDS = {"_id", "email", "role", "status", "created_at", "last_logged_in"}

# -----------------------------
# ORDERS
# -----------------------------

DEFAULT_ORDER_STATUS = "Pending"

# -----------------------------
# IDENTITY
# -----------------------------

# syntax check only: the email is the identifier and is stored exactly as sent
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"
