from .add_tag import AddTagRequest, AddTagResponse, AddTagUseCase
from .base import UseCase, UseCaseRequest, UseCaseResponse
from .update_photo import UpdatePhotoRequest, UpdatePhotoResponse, UpdatePhotoUseCase

__all__ = [
    "AddTagRequest",
    "AddTagResponse",
    "AddTagUseCase",
    "UpdatePhotoRequest",
    "UpdatePhotoResponse",
    "UpdatePhotoUseCase",
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
]
