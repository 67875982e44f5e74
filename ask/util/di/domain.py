"""Domain layer DI providers."""

from dishka import Scope, provide

from ask.config import AuthSettings, NotificationSettings
from ask.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TransactionManager,
    VoteRepository,
)
from ask.domain.service import (
    AcceptanceService,
    AnswerService,
    IdentityService,
    NotificationClient,
    QuestionService,
    ReactionDispatcher,
    TallyService,
    ViewCounterService,
    VoteService,
)
from ask.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The reaction dispatcher is APP-scoped: its deliveries outlive the request
    that produced them.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_reaction_dispatcher(
        self,
        notification_client: NotificationClient,
        notification_settings: NotificationSettings,
    ) -> ReactionDispatcher:
        """Provide the process-wide reaction dispatcher."""
        return ReactionDispatcher(
            notification_client=notification_client,
            max_pending=notification_settings.max_pending,
        )

    @provide
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide identity verification service."""
        return IdentityService(auth_settings=auth_settings)

    @provide
    def get_tally_service(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> TallyService:
        """Provide tally domain service."""
        return TallyService(
            vote_repository=vote_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        tally_service: TallyService,
        transaction_manager: TransactionManager,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
            tally_service=tally_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        transaction_manager: TransactionManager,
        reaction_dispatcher: ReactionDispatcher,
    ) -> AcceptanceService:
        """Provide acceptance domain service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            transaction_manager=transaction_manager,
            reaction_dispatcher=reaction_dispatcher,
        )

    @provide
    def get_view_counter_service(
        self,
        question_repository: QuestionRepository,
        transaction_manager: TransactionManager,
    ) -> ViewCounterService:
        """Provide view counter domain service."""
        return ViewCounterService(
            question_repository=question_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        transaction_manager: TransactionManager,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_answer_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        transaction_manager: TransactionManager,
        reaction_dispatcher: ReactionDispatcher,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            transaction_manager=transaction_manager,
            reaction_dispatcher=reaction_dispatcher,
        )
