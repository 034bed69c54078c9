"""Doubt use cases."""

from .create_doubt import CreateDoubtRequest, CreateDoubtResponse, CreateDoubtUseCase
from .delete_doubt import DeleteDoubtRequest, DeleteDoubtResponse, DeleteDoubtUseCase
from .get_doubt import GetDoubtRequest, GetDoubtResponse, GetDoubtUseCase
from .list_doubts import (
    DoubtItem,
    ListDoubtsRequest,
    ListDoubtsResponse,
    ListDoubtsUseCase,
)
from .toggle_solved import ToggleSolvedRequest, ToggleSolvedResponse, ToggleSolvedUseCase
from .vote_doubt import VoteDoubtRequest, VoteDoubtUseCase

__all__ = [
    "CreateDoubtRequest",
    "CreateDoubtResponse",
    "CreateDoubtUseCase",
    "DeleteDoubtRequest",
    "DeleteDoubtResponse",
    "DeleteDoubtUseCase",
    "DoubtItem",
    "GetDoubtRequest",
    "GetDoubtResponse",
    "GetDoubtUseCase",
    "ListDoubtsRequest",
    "ListDoubtsResponse",
    "ListDoubtsUseCase",
    "ToggleSolvedRequest",
    "ToggleSolvedResponse",
    "ToggleSolvedUseCase",
    "VoteDoubtRequest",
    "VoteDoubtUseCase",
]
