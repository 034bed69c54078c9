"""Domain layer DI providers."""

from dishka import Scope, provide

from unihub.config import AuthSettings, PaginationSettings, SearchSettings
from unihub.domain.repository import (
    AnswerRepository,
    DoubtRepository,
    EventRepository,
    NoteRepository,
    SearchRepository,
    UserRepository,
    VoteRepository,
)
from unihub.domain.service import (
    AnswerService,
    DoubtService,
    EventService,
    JWTService,
    NoteService,
    SearchService,
    UserService,
    VoteLedger,
)
from unihub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_vote_ledger(self, vote_repository: VoteRepository) -> VoteLedger:
        """Provide the vote ledger shared by doubts, answers and notes."""
        return VoteLedger(vote_repository=vote_repository)

    @provide
    def get_search_service(
        self, search_repository: SearchRepository, search_settings: SearchSettings
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(
            search_repository=search_repository, search_settings=search_settings
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        doubt_repository: DoubtRepository,
        vote_ledger: VoteLedger,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            doubt_repository=doubt_repository,
            vote_ledger=vote_ledger,
        )

    @provide
    def get_doubt_service(
        self,
        doubt_repository: DoubtRepository,
        answer_service: AnswerService,
        vote_ledger: VoteLedger,
        search_service: SearchService,
        pagination_settings: PaginationSettings,
    ) -> DoubtService:
        """Provide doubt domain service."""
        return DoubtService(
            doubt_repository=doubt_repository,
            answer_service=answer_service,
            vote_ledger=vote_ledger,
            search_service=search_service,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_note_service(
        self,
        note_repository: NoteRepository,
        vote_ledger: VoteLedger,
        search_service: SearchService,
        pagination_settings: PaginationSettings,
    ) -> NoteService:
        """Provide note domain service."""
        return NoteService(
            note_repository=note_repository,
            vote_ledger=vote_ledger,
            search_service=search_service,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_event_service(
        self,
        event_repository: EventRepository,
        search_service: SearchService,
        pagination_settings: PaginationSettings,
    ) -> EventService:
        """Provide event domain service."""
        return EventService(
            event_repository=event_repository,
            search_service=search_service,
            pagination_settings=pagination_settings,
        )
