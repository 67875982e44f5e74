"""Application layer DI providers."""

from dishka import Scope, provide

from ask.application.usecase.answer import (
    AcceptAnswerUseCase,
    ListAnswersUseCase,
    SubmitAnswerUseCase,
)
from ask.application.usecase.question import (
    RecordViewUseCase,
    RegisterQuestionUseCase,
)
from ask.application.usecase.vote import CastVoteUseCase, GetTallyUseCase
from ask.domain.service import (
    AcceptanceService,
    AnswerService,
    QuestionService,
    TallyService,
    ViewCounterService,
    VoteService,
)
from ask.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_tally_use_case(self, tally_service: TallyService) -> GetTallyUseCase:
        """Provide get tally use case."""
        return GetTallyUseCase(tally_service=tally_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, acceptance_service: AcceptanceService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(acceptance_service=acceptance_service)

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self, tally_service: TallyService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(tally_service=tally_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_answer_use_case(
        self, answer_service: AnswerService
    ) -> SubmitAnswerUseCase:
        """Provide submit answer use case."""
        return SubmitAnswerUseCase(answer_service=answer_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_record_view_use_case(
        self, view_counter_service: ViewCounterService
    ) -> RecordViewUseCase:
        """Provide record view use case."""
        return RecordViewUseCase(view_counter_service=view_counter_service)

    @provide(scope=Scope.REQUEST)
    def get_register_question_use_case(
        self, question_service: QuestionService
    ) -> RegisterQuestionUseCase:
        """Provide register question use case."""
        return RegisterQuestionUseCase(question_service=question_service)
