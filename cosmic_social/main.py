# cosmic_social/main.py
import logging
import sys

import httpx

from cosmic_social.config import AppConfig
from cosmic_social.domain.events import (
    MessageReacted,
    MessageSent,
    PostCommented,
    UserFollowed,
    UserMentioned,
)
from cosmic_social.gateways.feed_gateway import FeedGateway
from cosmic_social.gateways.follow_gateway import FollowGateway
from cosmic_social.gateways.message_gateway import MessageGateway
from cosmic_social.gateways.notification_gateway import NotificationGateway
from cosmic_social.gateways.profile_gateway import ProfileGateway
from cosmic_social.infrastructure.api_client import ApiClient
from cosmic_social.infrastructure.event_dispatcher import EventDispatcher
from cosmic_social.infrastructure.event_handlers import NotificationHandlers
from cosmic_social.interactors.feed_interactor import FeedInteractor
from cosmic_social.interactors.follow_interactor import FollowInteractor
from cosmic_social.interactors.message_interactor import MessageInteractor
from cosmic_social.interactors.notification_interactor import NotificationInteractor
from cosmic_social.interactors.profile_interactor import ProfileInteractor


class Application:
    def __init__(
        self, config: AppConfig, transport: httpx.AsyncBaseTransport | None = None
    ):
        self.config = config
        self.logger = self.setup_logger()
        self.api_client = ApiClient(
            config.API_BASE_URL,
            timeout=config.API_TIMEOUT_SECONDS,
            transport=transport,
            logger=self.logger,
        )
        self.event_dispatcher = EventDispatcher(self.logger)

        self.feed_gateway = FeedGateway(self.api_client)
        self.follow_gateway = FollowGateway(self.api_client)
        self.message_gateway = MessageGateway(self.api_client)
        self.notification_gateway = NotificationGateway(self.api_client)
        self.profile_gateway = ProfileGateway(self.api_client)

        self.notification_handlers = NotificationHandlers(
            self.notification_gateway, self.logger
        )

        # Register event handlers
        self.event_dispatcher.register(
            UserFollowed, self.notification_handlers.on_user_followed
        )
        self.event_dispatcher.register(
            MessageSent, self.notification_handlers.on_message_sent
        )
        self.event_dispatcher.register(
            MessageReacted, self.notification_handlers.on_message_reacted
        )
        self.event_dispatcher.register(
            PostCommented, self.notification_handlers.on_post_commented
        )
        self.event_dispatcher.register(
            UserMentioned, self.notification_handlers.on_user_mentioned
        )

        self.feed = FeedInteractor(self.feed_gateway, self.event_dispatcher, self.logger)
        self.follows = FollowInteractor(
            self.follow_gateway, self.event_dispatcher, self.logger
        )
        self.messages = MessageInteractor(
            self.message_gateway, self.event_dispatcher, self.logger
        )
        self.notifications = NotificationInteractor(self.notification_gateway)
        self.profiles = ProfileInteractor(self.profile_gateway, self.logger)

    def setup_logger(self):
        logger = logging.getLogger("CosmicSocial")
        logger.setLevel(self.config.LOG_LEVEL.upper())

        if not logger.handlers:
            c_handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            c_handler.setFormatter(formatter)
            logger.addHandler(c_handler)

        return logger

    async def close(self) -> None:
        await self.api_client.close()

    async def __aenter__(self) -> "Application":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def create(config: AppConfig | None = None) -> Application:
    application = Application(config or AppConfig())
    application.logger.info(
        f"{application.config.PROJECT_NAME} {application.config.PROJECT_VERSION} "
        f"configured against {application.config.API_BASE_URL}"
    )
    return application
