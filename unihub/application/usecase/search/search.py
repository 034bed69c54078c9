"""Federated search use case."""

from typing import Literal

import logfire
from pydantic import BaseModel, Field

from unihub.application.usecase.doubt.list_doubts import DoubtItem
from unihub.application.usecase.event.get_event import EventItem
from unihub.application.usecase.note.get_note import NoteItem
from unihub.domain.service import (
    DoubtService,
    EventService,
    NoteService,
    SearchService,
    UserService,
)
from unihub.domain.value import DoubtId, EventId, NoteId, SearchKind


class SearchRequest(BaseModel):
    """Search request."""

    q: str
    type: SearchKind | Literal["all"] = "all"


class SearchResultGroups(BaseModel):
    """Ranked results grouped by collection."""

    notes: list[NoteItem] = Field(default_factory=list)
    doubts: list[DoubtItem] = Field(default_factory=list)
    events: list[EventItem] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Search response.

    degraded is set when the index could not be queried; results are then
    empty.
    """

    query: str
    results: SearchResultGroups
    degraded: bool = False


class SearchUseCase:
    """Use case for searching notes, doubts and events at once."""

    def __init__(
        self,
        search_service: SearchService,
        doubt_service: DoubtService,
        note_service: NoteService,
        event_service: EventService,
        user_service: UserService,
    ) -> None:
        """Initialize search use case.

        Args:
            search_service: Search domain service
            doubt_service: Doubt domain service
            note_service: Note domain service
            event_service: Event domain service
            user_service: User domain service
        """
        self.search_service = search_service
        self.doubt_service = doubt_service
        self.note_service = note_service
        self.event_service = event_service
        self.user_service = user_service

    async def execute(self, request: SearchRequest) -> SearchResponse:
        """Execute search flow.

        Hits are ranked by the index, then hydrated from their source
        entities. Hits whose source has disappeared are dropped.

        Args:
            request: Search request with query text and optional kind

        Returns:
            Ranked results per collection
        """
        kind = None if request.type == "all" else request.type
        with logfire.span(
            "search.execute", query=request.q, kind=kind.value if kind else "all"
        ):
            found = await self.search_service.query(request.q, kind)

            notes = await self.note_service.get_many(
                [NoteId(hit.document.source_id) for hit in found.for_kind(SearchKind.NOTES)]
            )
            doubts = await self.doubt_service.get_many(
                [
                    DoubtId(hit.document.source_id)
                    for hit in found.for_kind(SearchKind.DOUBTS)
                ]
            )
            events = await self.event_service.get_many(
                [
                    EventId(hit.document.source_id)
                    for hit in found.for_kind(SearchKind.EVENTS)
                ]
            )

            authors = await self.user_service.get_users(
                [note.uploaded_by_id for note in notes]
                + [doubt.asked_by_id for doubt in doubts]
                + [event.created_by_id for event in events]
            )

            if found.degraded:
                logfire.warn("Search served degraded", query=request.q)

            return SearchResponse(
                query=request.q,
                results=SearchResultGroups(
                    notes=[
                        NoteItem.from_note(note, authors.get(note.uploaded_by_id))
                        for note in notes
                    ],
                    doubts=[
                        DoubtItem.from_doubt(doubt, authors.get(doubt.asked_by_id))
                        for doubt in doubts
                    ],
                    events=[
                        EventItem.from_event(event, authors.get(event.created_by_id))
                        for event in events
                    ],
                ),
                degraded=found.degraded,
            )
