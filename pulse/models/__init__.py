# pulse/models/__init__.py
from .review import Review, ReviewLike
from .account import Account, VerificationCode

__all__ = ["Review", "ReviewLike", "Account", "VerificationCode"]
