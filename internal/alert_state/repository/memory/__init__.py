from .new import New
from .repository import AlertStateMemoryRepository

__all__ = ["New", "AlertStateMemoryRepository"]
