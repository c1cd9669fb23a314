from .auth import LoginView, SignupView
from .me import MeView

__all__ = [
    "SignupView",
    "LoginView",
    "MeView",
]
