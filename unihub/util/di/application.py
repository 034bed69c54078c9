"""Application layer DI providers."""

from dishka import Scope, provide

from unihub.application.usecase.answer import (
    ListAnswersUseCase,
    PostAnswerUseCase,
    VoteAnswerUseCase,
)
from unihub.application.usecase.auth import GetCurrentUserUseCase
from unihub.application.usecase.doubt import (
    CreateDoubtUseCase,
    DeleteDoubtUseCase,
    GetDoubtUseCase,
    ListDoubtsUseCase,
    ToggleSolvedUseCase,
    VoteDoubtUseCase,
)
from unihub.application.usecase.event import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    ListEventsUseCase,
)
from unihub.application.usecase.note import (
    CreateNoteUseCase,
    DeleteNoteUseCase,
    GetNoteUseCase,
    LikeNoteUseCase,
    ListNotesUseCase,
)
from unihub.application.usecase.search import SearchUseCase, SuggestUseCase
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Doubt use cases
    @provide
    def get_list_doubts_use_case(
        self,
        doubt_service: DoubtService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> ListDoubtsUseCase:
        """Provide list doubts use case."""
        return ListDoubtsUseCase(
            doubt_service=doubt_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    @provide
    def get_get_doubt_use_case(
        self,
        doubt_service: DoubtService,
        answer_service: AnswerService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> GetDoubtUseCase:
        """Provide get doubt use case."""
        return GetDoubtUseCase(
            doubt_service=doubt_service,
            answer_service=answer_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    @provide
    def get_create_doubt_use_case(
        self, doubt_service: DoubtService, user_service: UserService
    ) -> CreateDoubtUseCase:
        """Provide create doubt use case."""
        return CreateDoubtUseCase(doubt_service=doubt_service, user_service=user_service)

    @provide
    def get_vote_doubt_use_case(self, doubt_service: DoubtService) -> VoteDoubtUseCase:
        """Provide vote doubt use case."""
        return VoteDoubtUseCase(doubt_service=doubt_service)

    @provide
    def get_toggle_solved_use_case(
        self, doubt_service: DoubtService, user_service: UserService
    ) -> ToggleSolvedUseCase:
        """Provide toggle solved use case."""
        return ToggleSolvedUseCase(
            doubt_service=doubt_service, user_service=user_service
        )

    @provide
    def get_delete_doubt_use_case(
        self, doubt_service: DoubtService, user_service: UserService
    ) -> DeleteDoubtUseCase:
        """Provide delete doubt use case."""
        return DeleteDoubtUseCase(doubt_service=doubt_service, user_service=user_service)

    # Answer use cases
    @provide
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    @provide
    def get_post_answer_use_case(
        self, doubt_service: DoubtService, user_service: UserService
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(doubt_service=doubt_service, user_service=user_service)

    @provide
    def get_vote_answer_use_case(
        self, answer_service: AnswerService
    ) -> VoteAnswerUseCase:
        """Provide vote answer use case."""
        return VoteAnswerUseCase(answer_service=answer_service)

    # Note use cases
    @provide
    def get_get_note_use_case(
        self,
        note_service: NoteService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> GetNoteUseCase:
        """Provide get note use case."""
        return GetNoteUseCase(
            note_service=note_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    @provide
    def get_list_notes_use_case(
        self,
        note_service: NoteService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> ListNotesUseCase:
        """Provide list notes use case."""
        return ListNotesUseCase(
            note_service=note_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    @provide
    def get_create_note_use_case(
        self, note_service: NoteService, user_service: UserService
    ) -> CreateNoteUseCase:
        """Provide create note use case."""
        return CreateNoteUseCase(note_service=note_service, user_service=user_service)

    @provide
    def get_like_note_use_case(self, note_service: NoteService) -> LikeNoteUseCase:
        """Provide like note use case."""
        return LikeNoteUseCase(note_service=note_service)

    @provide
    def get_delete_note_use_case(
        self, note_service: NoteService, user_service: UserService
    ) -> DeleteNoteUseCase:
        """Provide delete note use case."""
        return DeleteNoteUseCase(note_service=note_service, user_service=user_service)

    # Event use cases
    @provide
    def get_get_event_use_case(
        self, event_service: EventService, user_service: UserService
    ) -> GetEventUseCase:
        """Provide get event use case."""
        return GetEventUseCase(event_service=event_service, user_service=user_service)

    @provide
    def get_list_events_use_case(
        self, event_service: EventService, user_service: UserService
    ) -> ListEventsUseCase:
        """Provide list events use case."""
        return ListEventsUseCase(event_service=event_service, user_service=user_service)

    @provide
    def get_create_event_use_case(
        self, event_service: EventService, user_service: UserService
    ) -> CreateEventUseCase:
        """Provide create event use case."""
        return CreateEventUseCase(
            event_service=event_service, user_service=user_service
        )

    @provide
    def get_delete_event_use_case(
        self, event_service: EventService, user_service: UserService
    ) -> DeleteEventUseCase:
        """Provide delete event use case."""
        return DeleteEventUseCase(
            event_service=event_service, user_service=user_service
        )

    # Search use cases
    @provide
    def get_search_use_case(
        self,
        search_service: SearchService,
        doubt_service: DoubtService,
        note_service: NoteService,
        event_service: EventService,
        user_service: UserService,
    ) -> SearchUseCase:
        """Provide search use case."""
        return SearchUseCase(
            search_service=search_service,
            doubt_service=doubt_service,
            note_service=note_service,
            event_service=event_service,
            user_service=user_service,
        )

    @provide
    def get_suggest_use_case(self, search_service: SearchService) -> SuggestUseCase:
        """Provide search suggestions use case."""
        return SuggestUseCase(search_service=search_service)
