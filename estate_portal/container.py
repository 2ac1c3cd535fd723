"""Application dependency container."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from functools import cached_property
from operator import attrgetter

import httpx

from estate_portal.application.session_store import SessionStore
from estate_portal.application.use_cases.users import (
    LoginUserUseCase,
    LogoutUserUseCase,
    SignupUserUseCase,
)
from estate_portal.domain.users import SessionStorage
from estate_portal.infrastructure.api import ApiEndpoint, AuthApiClient, AuthenticatedClient
from estate_portal.infrastructure.api.schemas import (
    ApplicationFilter,
    CallFilter,
    CategoryFilter,
    JobFilter,
    PropertyFilter,
    PropertyTypeFilter,
    RegistrationFilter,
)
from estate_portal.infrastructure.session_storage import (
    FileSessionStorage,
    NamespacedSessionStorage,
)
from estate_portal.interfaces.http.controllers.auth_controller import AuthController
from estate_portal.interfaces.http.controllers.dashboard_controller import (
    ApplicationsController,
    PropertiesController,
    ResourceController,
)
from estate_portal.interfaces.http.controllers.public_controller import PublicController
from estate_portal.interfaces.http.dto.catalog import (
    CallFormDTO,
    CategoryFormDTO,
    JobFormDTO,
    PropertyTypeFormDTO,
)
from estate_portal.interfaces.http.dto.registrations import RegistrationFormDTO
from estate_portal.services import (
    ApplicationService,
    CallService,
    CategoryService,
    ContactService,
    JobService,
    PropertyService,
    PropertyTypeService,
    RegistrationService,
)
from estate_portal.shared.config import AppConfig, load_config


class SessionScope:
    """One caller's session store and the API clients and services bound to it."""

    def __init__(
        self,
        session_id: str,
        *,
        storage: SessionStorage,
        endpoint: ApiEndpoint,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.session_id = session_id
        self._storage = storage
        self._endpoint = endpoint
        self._clock = clock

    @cached_property
    def session_store(self) -> SessionStore:
        storage = NamespacedSessionStorage(self._storage, self.session_id)
        return SessionStore(storage, clock=self._clock).init()

    @cached_property
    def auth_api(self) -> AuthApiClient:
        return AuthApiClient(self._endpoint, self.session_store)

    @cached_property
    def api_client(self) -> AuthenticatedClient:
        return AuthenticatedClient(self._endpoint, self.session_store, self.auth_api)

    # --- services -----------------------------------------------------------

    @cached_property
    def properties(self) -> PropertyService:
        return PropertyService(self.api_client)

    @cached_property
    def property_types(self) -> PropertyTypeService:
        return PropertyTypeService(self.api_client)

    @cached_property
    def categories(self) -> CategoryService:
        return CategoryService(self.api_client)

    @cached_property
    def jobs(self) -> JobService:
        return JobService(self.api_client)

    @cached_property
    def applications(self) -> ApplicationService:
        return ApplicationService(self.api_client)

    @cached_property
    def registrations(self) -> RegistrationService:
        return RegistrationService(self.api_client)

    @cached_property
    def calls(self) -> CallService:
        return CallService(self.api_client)

    @cached_property
    def contact(self) -> ContactService:
        return ContactService(self.api_client)

    # --- use cases ----------------------------------------------------------

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(auth_api=self.auth_api, sessions=self.session_store)

    @cached_property
    def signup_user_use_case(self) -> SignupUserUseCase:
        return SignupUserUseCase(auth_api=self.auth_api, sessions=self.session_store)

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(auth_api=self.auth_api)


class Container:
    """Process-wide wiring: config, the shared session storage and the controllers.

    Everything tied to a login lives on a ``SessionScope`` built per caller by
    ``scope()``. ``storage``, ``transport`` and ``clock`` replace the file
    storage, the network and the wall clock in tests.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        storage: SessionStorage | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config or load_config()
        self._storage = storage
        self._transport = transport
        self._clock = clock

    @cached_property
    def session_storage(self) -> SessionStorage:
        return self._storage or FileSessionStorage(self.config.session.file)

    @cached_property
    def endpoint(self) -> ApiEndpoint:
        return ApiEndpoint(
            base_url=self.config.api.base_url,
            timeout=self.config.api.timeout,
            transport=self._transport,
        )

    def scope(self, session_id: str) -> SessionScope:
        return SessionScope(
            session_id,
            storage=self.session_storage,
            endpoint=self.endpoint,
            clock=self._clock,
        )

    # --- controllers --------------------------------------------------------

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController()

    @cached_property
    def public_controller(self) -> PublicController:
        return PublicController(cv_max_bytes=self.config.uploads.cv_max_bytes)

    @cached_property
    def dashboard_controllers(self) -> list[ResourceController]:
        return [
            PropertiesController(
                service=attrgetter("properties"),
                filter_model=PropertyFilter,
                max_images=self.config.uploads.property_images_max,
            ),
            ResourceController(
                "property-types",
                service=attrgetter("property_types"),
                filter_model=PropertyTypeFilter,
                form=PropertyTypeFormDTO,
            ),
            ResourceController(
                "categories",
                service=attrgetter("categories"),
                filter_model=CategoryFilter,
                form=CategoryFormDTO,
            ),
            ResourceController(
                "jobs",
                service=attrgetter("jobs"),
                filter_model=JobFilter,
                form=JobFormDTO,
            ),
            ApplicationsController(
                service=attrgetter("applications"), filter_model=ApplicationFilter
            ),
            ResourceController(
                "registrations",
                service=attrgetter("registrations"),
                filter_model=RegistrationFilter,
                form=RegistrationFormDTO,
                creatable=False,
            ),
            ResourceController(
                "calls",
                service=attrgetter("calls"),
                filter_model=CallFilter,
                form=CallFormDTO,
            ),
        ]
