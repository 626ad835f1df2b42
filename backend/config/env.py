import os
from dotenv import load_dotenv

load_dotenv()

# =====================================================
# ENV
# =====================================================
ENV = os.getenv("ENV") or os.getenv("NODE_ENV") or "development"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def is_production() -> bool:
    return (ENV or "").lower() == "production"


# =====================================================
# DATABASE
# =====================================================
MONGO_URI = os.getenv("MONGODB_URI") or os.getenv("MONGO_URI") or "mongodb://localhost:27017"
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "plantdb")

# =====================================================
# JWT
# =====================================================
JWT_SECRET = os.getenv("JWT_SECRET") or os.getenv("ACCESS_TOKEN_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_DAYS = int(os.getenv("ACCESS_TOKEN_DAYS", 365))

# =====================================================
# STRIPE
# =====================================================
STRIPE_SK_KEY = os.getenv("STRIPE_SK_KEY")
PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "usd")

# =====================================================
# CORS
# =====================================================
CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")


def validate_production_env() -> None:
    if not is_production():
        return

    required = {
        "JWT_SECRET": JWT_SECRET,
        "MONGODB_URI": os.getenv("MONGODB_URI") or os.getenv("MONGO_URI"),
        "STRIPE_SK_KEY": STRIPE_SK_KEY,
    }

    invalid = []
    for key, value in required.items():
        val = (value or "").strip()
        if not val or val.startswith("CHANGE_THIS"):
            invalid.append(key)

    if invalid:
        raise RuntimeError(f"Production env misconfigured. Invalid keys: {', '.join(sorted(invalid))}")
