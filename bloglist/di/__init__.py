from .base_container import BaseContainer
from .container import DIContainer, get_container, set_container, register_application

__all__ = [
    "BaseContainer",
    "DIContainer",
    "get_container",
    "set_container",
    "register_application",
]
