import logging
from dataclasses import dataclass

from .base import UseCase, UseCaseRequest, UseCaseResponse
from photocat.domain.repositories import ICatalogStore
from photocat.domain.services.lookup import PhotoLookup

@dataclass(frozen=True)
class AddTagRequest(UseCaseRequest):
    tag: str = ""

@dataclass(frozen=True)
class AddTagResponse(UseCaseResponse):
    tagged_count: int = 0

class AddTagUseCase(UseCase[AddTagRequest, AddTagResponse]):
    def __init__(self, store: ICatalogStore, lookup: PhotoLookup):
        self._store = store
        self._lookup = lookup
        self._logger = logging.getLogger(__name__)

    def execute(self, request: AddTagRequest) -> AddTagResponse:
        photos = self._store.load_photos()
        photo = self._lookup.find_photo(request.photo_id)
        if photo is None:
            return AddTagResponse(success=False, error="Photo not found")

        # Every record sharing the id is tagged, not just the first one.
        tagged = 0
        for existing in photos:
            if existing.id == photo.id:
                existing.tags.append(request.tag)
                tagged += 1

        self._store.save_photos(photos)
        self._logger.info(f"Tagged {tagged} record(s) of photo {photo.id} with {request.tag!r}")
        return AddTagResponse(success=True, tagged_count=tagged)
