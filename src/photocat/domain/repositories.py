from abc import ABC, abstractmethod
from typing import List, Sequence

from .models import Album, Photo


class ICatalogStore(ABC):
    @abstractmethod
    def load_photos(self) -> List[Photo]:
        """Read the whole photo collection"""
        pass

    @abstractmethod
    def load_albums(self) -> List[Album]:
        """Read the whole album collection"""
        pass

    @abstractmethod
    def save_photos(self, photos: Sequence[Photo]) -> None:
        """Overwrite the photo collection with *photos*"""
        pass
