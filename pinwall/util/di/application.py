"""Application layer DI providers."""

from dishka import Scope, provide

from pinwall.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from pinwall.application.usecase.image import (
    CreateImageUseCase,
    DeleteImageUseCase,
    ListImagesUseCase,
    ListMyImagesUseCase,
)
from pinwall.domain.service import (
    AuthService,
    ImageService,
    SessionService,
    UserService,
)
from pinwall.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        auth_service: AuthService,
        session_service: SessionService,
        user_service: UserService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            session_service=session_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, session_service: SessionService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            session_service=session_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, session_service: SessionService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(session_service=session_service)

    # Image use cases
    @provide(scope=Scope.REQUEST)
    def get_create_image_use_case(
        self, image_service: ImageService
    ) -> CreateImageUseCase:
        """Provide create image use case."""
        return CreateImageUseCase(image_service=image_service)

    @provide(scope=Scope.REQUEST)
    def get_list_my_images_use_case(
        self, image_service: ImageService
    ) -> ListMyImagesUseCase:
        """Provide list own images use case."""
        return ListMyImagesUseCase(image_service=image_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_image_use_case(
        self, image_service: ImageService
    ) -> DeleteImageUseCase:
        """Provide delete image use case."""
        return DeleteImageUseCase(image_service=image_service)

    @provide(scope=Scope.REQUEST)
    def get_list_images_use_case(
        self, image_service: ImageService, user_service: UserService
    ) -> ListImagesUseCase:
        """Provide list public images use case."""
        return ListImagesUseCase(image_service=image_service, user_service=user_service)
