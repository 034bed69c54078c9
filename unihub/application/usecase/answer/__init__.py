"""Answer use cases."""

from .list_answers import (
    AnswerItem,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from .post_answer import PostAnswerRequest, PostAnswerResponse, PostAnswerUseCase
from .vote_answer import VoteAnswerRequest, VoteAnswerUseCase

__all__ = [
    "AnswerItem",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "PostAnswerRequest",
    "PostAnswerResponse",
    "PostAnswerUseCase",
    "VoteAnswerRequest",
    "VoteAnswerUseCase",
]
