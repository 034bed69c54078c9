"""Note use cases."""

from .create_note import CreateNoteRequest, CreateNoteResponse, CreateNoteUseCase
from .delete_note import DeleteNoteRequest, DeleteNoteResponse, DeleteNoteUseCase
from .get_note import GetNoteRequest, GetNoteResponse, GetNoteUseCase, NoteItem
from .like_note import LikeNoteRequest, LikeNoteResponse, LikeNoteUseCase
from .list_notes import ListNotesRequest, ListNotesResponse, ListNotesUseCase

__all__ = [
    "CreateNoteRequest",
    "CreateNoteResponse",
    "CreateNoteUseCase",
    "DeleteNoteRequest",
    "DeleteNoteResponse",
    "DeleteNoteUseCase",
    "GetNoteRequest",
    "GetNoteResponse",
    "GetNoteUseCase",
    "LikeNoteRequest",
    "LikeNoteResponse",
    "LikeNoteUseCase",
    "ListNotesRequest",
    "ListNotesResponse",
    "ListNotesUseCase",
    "NoteItem",
]
