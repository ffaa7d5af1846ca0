"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_tracker.adapters.in_memory_repositories import (
    InMemoryFoodLogRepository,
    InMemoryFoodNutritionRepository,
    InMemoryUserRepository,
)
from food_tracker.adapters.sql_models import build_session_factory, create_database
from food_tracker.adapters.sql_repositories import (
    SqlFoodLogRepository,
    SqlFoodNutritionRepository,
    SqlUserRepository,
)
from food_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from food_tracker.adapters.supabase_food_nutrition_repository import (
    SupabaseFoodNutritionRepository,
)
from food_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from food_tracker.config import Settings, parse_storage_backend
from food_tracker.services.credentials import (
    CredentialVerifier,
    PlaintextCredentialVerifier,
)
from food_tracker.services.food_logs import FoodLogRepository, FoodLogService
from food_tracker.services.nutrition import (
    FoodNutritionRepository,
    FoodNutritionService,
)
from food_tracker.services.stats import StatsService
from food_tracker.services.users import UserRepository, UserService

_logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """The three repository ports backed by one storage backend."""

    users: UserRepository
    food_nutrition: FoodNutritionRepository
    food_logs: FoodLogRepository
    close: Callable[[], None]


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    food_nutrition_service: FoodNutritionService
    food_log_service: FoodLogService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_repositories(settings: Settings) -> Repositories:
    """Create the repositories for the configured storage backend."""
    backend = parse_storage_backend(settings.storage_backend)
    _logger.info("Using storage backend: %s", backend)
    if backend == "sql":
        engine = create_database(settings.database_url, echo=settings.database_echo)
        session_factory = build_session_factory(engine)
        return Repositories(
            users=SqlUserRepository(session_factory),
            food_nutrition=SqlFoodNutritionRepository(session_factory),
            food_logs=SqlFoodLogRepository(session_factory),
            close=engine.dispose,
        )
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for supabase"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return Repositories(
            users=SupabaseUserRepository(client),
            food_nutrition=SupabaseFoodNutritionRepository(client),
            food_logs=SupabaseFoodLogRepository(client),
            close=lambda: None,
        )
    return Repositories(
        users=InMemoryUserRepository(),
        food_nutrition=InMemoryFoodNutritionRepository(),
        food_logs=InMemoryFoodLogRepository(),
        close=lambda: None,
    )


def build_container(
    settings: Settings | None = None,
    credentials: CredentialVerifier | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repositories = build_repositories(resolved_settings)
    return build_container_from(
        resolved_settings,
        repositories,
        credentials or PlaintextCredentialVerifier(),
    )


def build_container_from(
    settings: Settings,
    repositories: Repositories,
    credentials: CredentialVerifier,
) -> AppContainer:
    """Wire services around an existing set of repositories."""
    user_service = UserService(repositories.users, credentials)
    food_nutrition_service = FoodNutritionService(
        repository=repositories.food_nutrition,
        food_log_repository=repositories.food_logs,
    )
    food_log_service = FoodLogService(
        repository=repositories.food_logs,
        food_nutrition_repository=repositories.food_nutrition,
        user_repository=repositories.users,
    )
    stats_service = StatsService(
        food_log_repository=repositories.food_logs,
        user_repository=repositories.users,
    )

    async def close_resources() -> None:
        repositories.close()

    return AppContainer(
        settings=settings,
        user_service=user_service,
        food_nutrition_service=food_nutrition_service,
        food_log_service=food_log_service,
        stats_service=stats_service,
        close_resources=close_resources,
    )
