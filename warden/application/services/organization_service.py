"""Organization Service.

This service orchestrates organization management. Every mutation has
the same shape:

1. LOAD - read the organization document (NotFound if absent)
2. VALIDATE - resolve referenced users/wardens (NotFound if absent)
3. MUTATE - call the aggregate, which enforces its own invariants
4. REPLACE - write the whole organization back, conditional on the
   revision that was read

Mutations of one organization are serialized through a per-organization
lock (configurable) shared with IterationRecorderService. A writer
outside this process is still detected by the conditional replace,
which raises ConcurrentModificationError. Nothing is retried.
"""

from __future__ import annotations

from uuid import UUID

from structlog import get_logger
from structlog.typing import FilteringBoundLogger

from warden.application.dtos.organization import OrganizationDto
from warden.application.dtos.paging import BrowseOrganizations, PagedResult
from warden.application.ports.api_key_repository import ApiKeyRepositoryProtocol
from warden.application.ports.organization_repository import (
    OrganizationRepositoryProtocol,
)
from warden.application.ports.organization_service import OrganizationServiceProtocol
from warden.application.ports.user_repository import UserRepositoryProtocol
from warden.application.services.organization_locks import OrganizationLocks
from warden.config.organization_config import (
    DEFAULT_ORGANIZATION_CONFIG,
    OrganizationConfig,
)
from warden.domain.errors.kinds import ConflictError, InvalidArgumentError, NotFoundError
from warden.domain.errors.organization import (
    InvalidOrganizationNameError,
    OrganizationAlreadyExistsError,
    OrganizationNotFoundError,
    UserNotFoundError,
)
from warden.domain.models.organization import Organization, OrganizationRole

logger = get_logger()


class OrganizationService(OrganizationServiceProtocol):
    """Manages organizations, their wardens and their members.

    This service provides:
    1. Lookups by id, by (name, owner) and of the default organization
    2. Creation with uniqueness of names per owner
    3. Warden registration and enable/disable toggling
    4. Membership management and checks
    5. Paginated browsing

    Invariants live in the Organization aggregate; this service only
    loads, delegates and persists.
    """

    def __init__(
        self,
        organization_repository: OrganizationRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        api_key_repository: ApiKeyRepositoryProtocol,
        config: OrganizationConfig = DEFAULT_ORGANIZATION_CONFIG,
        locks: OrganizationLocks | None = None,
    ) -> None:
        """Initialize the Organization Service.

        Args:
            organization_repository: Store for organization documents.
            user_repository: Read-only user lookups.
            api_key_repository: Read-only API key lookups.
            config: Defaults, browse limits and locking behavior.
            locks: Lock registry shared with other services that write
                organizations; a private one honoring
                config.serialize_mutations is created if None.
        """
        self._organizations = organization_repository
        self._users = user_repository
        self._api_keys = api_key_repository
        self._config = config
        if locks is None:
            locks = OrganizationLocks(enabled=config.serialize_mutations)
        self._locks = locks

    # =========================================================================
    # Lookups
    # =========================================================================

    async def get(self, organization_id: UUID) -> OrganizationDto | None:
        """Get an organization with its API keys.

        Args:
            organization_id: The organization id.

        Returns:
            The organization projection or None if not found.
        """
        organization = await self._organizations.get_by_id(organization_id)
        return await self._with_api_keys(organization)

    async def get_by_name(self, name: str, owner_id: UUID) -> OrganizationDto | None:
        """Get an organization by its (name, owner) pair with its API keys.

        Args:
            name: The organization name.
            owner_id: The owner's user id.

        Returns:
            The organization projection or None if not found.
        """
        organization = await self._organizations.get_by_name_for_owner(name, owner_id)
        return await self._with_api_keys(organization)

    async def get_default(self, owner_id: UUID) -> OrganizationDto | None:
        """Get the owner's default organization."""
        return await self.get_by_name(self._config.default_organization_name, owner_id)

    async def is_user_in_organization(
        self, organization_id: UUID, user_id: UUID
    ) -> bool:
        """Check whether the user is a member of the organization.

        Returns:
            False if the organization does not exist.
        """
        organization = await self._organizations.get_by_id(organization_id)
        return organization is not None and organization.has_user(user_id)

    async def browse(
        self, query: BrowseOrganizations | None
    ) -> PagedResult[OrganizationDto]:
        """Get one page of organizations ordered by name.

        Browse results carry no API keys.

        Args:
            query: Filter and pagination. None yields an empty page.

        Returns:
            The requested page of projections.
        """
        if query is None:
            return PagedResult.empty()

        organizations = await self._organizations.browse(
            query.with_page_size(
                self._config.default_results_per_page,
                self._config.max_results_per_page,
            )
        )
        return organizations.map(OrganizationDto.from_domain)

    # =========================================================================
    # Creation
    # =========================================================================

    async def create_default(self, owner_id: UUID) -> OrganizationDto:
        """Create the owner's default organization."""
        return await self.create(self._config.default_organization_name, owner_id)

    async def create(
        self,
        name: str,
        owner_id: UUID,
        auto_register_new_warden: bool = True,
    ) -> OrganizationDto:
        """Create an organization owned by the given user.

        With ``auto_register_new_warden`` the configured default warden is
        registered right away.

        Args:
            name: Organization name, unique per owner.
            owner_id: The owning user's id.
            auto_register_new_warden: Flag stored on the organization.

        Returns:
            The created organization projection.

        Raises:
            InvalidOrganizationNameError: If the name is empty or blank.
            UserNotFoundError: If no user exists for owner_id.
            OrganizationAlreadyExistsError: If the owner already has an
                organization with this name.
        """
        log = logger.bind(operation="create", owner_id=str(owner_id), name=name)

        if not name or not name.strip():
            log.warning("organization_create_rejected", reason="empty_name")
            raise InvalidOrganizationNameError()

        owner = await self._users.get_by_id(owner_id)
        if owner is None:
            log.warning("organization_create_rejected", reason="owner_not_found")
            raise UserNotFoundError(user_id=owner_id)

        async with self._locks.hold(owner_id):
            existing = await self._organizations.get_by_name_for_owner(name, owner_id)
            if existing is not None:
                log.warning(
                    "organization_create_rejected",
                    reason="name_taken",
                    existing_organization_id=str(existing.id),
                )
                raise OrganizationAlreadyExistsError(name, owner_id)

            organization = Organization.create(
                name,
                owner,
                auto_register_new_warden=auto_register_new_warden,
                default_warden_name=self._config.default_warden_name
                if auto_register_new_warden
                else None,
            )
            await self._organizations.insert_one(organization)

        log.info(
            "organization_created",
            organization_id=str(organization.id),
            warden_count=len(organization.wardens),
        )
        return OrganizationDto.from_domain(organization)

    # =========================================================================
    # Mutations
    # =========================================================================

    async def add_warden(
        self, organization_id: UUID, name: str, enabled: bool = True
    ) -> OrganizationDto:
        """Register a warden in the organization.

        Raises:
            OrganizationNotFoundError: If the organization does not exist.
            InvalidWardenNameError: If the name is empty or blank.
            WardenAlreadyExistsError: If the name is already used.
            ConcurrentModificationError: If the organization changed
                since it was read.
        """
        log = logger.bind(
            operation="add_warden",
            organization_id=str(organization_id),
            warden_name=name,
        )
        async with self._locks.hold(organization_id):
            organization = await self._load_or_fail(organization_id, log)
            expected_revision = organization.revision
            try:
                organization.add_warden(name, enabled)
            except (InvalidArgumentError, ConflictError) as e:
                log.warning("add_warden_rejected", reason=str(e))
                raise
            await self._replace(organization, expected_revision)

        log.info("warden_added", enabled=enabled)
        return OrganizationDto.from_domain(organization)

    async def add_user(
        self,
        organization_id: UUID,
        email: str,
        role: OrganizationRole = OrganizationRole.USER,
    ) -> OrganizationDto:
        """Add the user with the given email as a member.

        Raises:
            OrganizationNotFoundError: If the organization does not exist.
            UserNotFoundError: If no user matches the email.
            InvalidOrganizationRoleError: If role is OWNER.
            UserAlreadyInOrganizationError: If the user is already a member.
            ConcurrentModificationError: If the organization changed
                since it was read.
        """
        log = logger.bind(
            operation="add_user",
            organization_id=str(organization_id),
            role=role.value,
        )
        async with self._locks.hold(organization_id):
            organization = await self._load_or_fail(organization_id, log)
            expected_revision = organization.revision

            user = await self._users.get_by_email(email)
            if user is None:
                log.warning("add_user_rejected", reason="user_not_found")
                raise UserNotFoundError(email=email)

            try:
                organization.add_user(user, role)
            except (InvalidArgumentError, ConflictError) as e:
                log.warning("add_user_rejected", reason=str(e), user_id=str(user.id))
                raise
            await self._replace(organization, expected_revision)

        log.info("user_added", user_id=str(user.id))
        return OrganizationDto.from_domain(organization)

    async def enable_warden(self, organization_id: UUID, name: str) -> OrganizationDto:
        """Enable the named warden. Enabling an enabled warden is a no-op.

        Raises:
            OrganizationNotFoundError: If the organization does not exist.
            WardenNotFoundError: If there is no warden with this name.
        """
        return await self._toggle_warden(organization_id, name, enabled=True)

    async def disable_warden(self, organization_id: UUID, name: str) -> OrganizationDto:
        """Disable the named warden. Disabling a disabled warden is a no-op.

        Raises:
            OrganizationNotFoundError: If the organization does not exist.
            WardenNotFoundError: If there is no warden with this name.
        """
        return await self._toggle_warden(organization_id, name, enabled=False)

    async def _toggle_warden(
        self, organization_id: UUID, name: str, enabled: bool
    ) -> OrganizationDto:
        log = logger.bind(
            operation="enable_warden" if enabled else "disable_warden",
            organization_id=str(organization_id),
            warden_name=name,
        )
        async with self._locks.hold(organization_id):
            organization = await self._load_or_fail(organization_id, log)
            expected_revision = organization.revision
            try:
                warden = organization.get_warden_by_name_or_fail(name)
            except NotFoundError as e:
                log.warning("toggle_warden_rejected", reason=str(e))
                raise

            if enabled:
                warden.enable()
            else:
                warden.disable()
            await self._replace(organization, expected_revision)

        log.info("warden_toggled", enabled=enabled)
        return OrganizationDto.from_domain(organization)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _load_or_fail(
        self, organization_id: UUID, log: FilteringBoundLogger
    ) -> Organization:
        organization = await self._organizations.get_by_id(organization_id)
        if organization is None:
            log.warning("organization_not_found")
            raise OrganizationNotFoundError(organization_id)
        return organization

    async def _replace(self, organization: Organization, expected_revision: int) -> None:
        organization.mark_updated()
        await self._organizations.replace_one(organization, expected_revision)

    async def _with_api_keys(
        self, organization: Organization | None
    ) -> OrganizationDto | None:
        if organization is None:
            return None

        api_keys = await self._api_keys.get_all_for_organization(organization.id)
        return OrganizationDto.from_domain(
            organization, api_keys=(api_key.key for api_key in api_keys)
        )
