"""Initial data seeder.

Ensures an empty store receives its baseline data on application startup:

1. Countries, then zones (only when no country exists)
2. Languages (only when none exist)
3. Currencies (only when none exist)
4. First site (only when no site exists)
5. Default roles for the tenant (only when the tenant has no role)
6. Administrator account with memberships (only when the tenant has no user)

Every step is guarded by a count, so running the seeder again on a seeded
store writes nothing. Steps run strictly in order because roles need the site
id and the administrator needs the roles.

Architecture:
- Application layer: depends on domain protocols only
- Repositories, tenant resolver and password hashing are injected
- Persistence errors propagate unchanged; nothing is retried or compensated
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import SiteResolutionError, TenantResolutionError
from src.application.seeding import initial_data
from src.domain.entities.site import Site, site_id_from_tenant
from src.domain.protocols import (
    GeographyRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    RoleRepository,
    SiteRepository,
    TenantResolver,
    UserRepository,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SeedReport:
    """What a seeding run inserted.

    Attributes:
        countries: Countries inserted.
        zones: Zones inserted.
        languages: Languages inserted.
        currencies: Currencies inserted.
        sites: Sites created (0 or 1).
        roles: Roles created.
        users: Users created (0 or 1).
        memberships: Role memberships added.
        site_id: Site that owns the roles/user written this run, if any.
        tenant_id: Tenant the role and user counts were scoped to.
    """

    countries: int = 0
    zones: int = 0
    languages: int = 0
    currencies: int = 0
    sites: int = 0
    roles: int = 0
    users: int = 0
    memberships: int = 0
    site_id: UUID | None = None
    tenant_id: str | None = None

    @property
    def seeded_anything(self) -> bool:
        """Whether the run inserted at least one record."""
        return any(
            (
                self.countries,
                self.zones,
                self.languages,
                self.currencies,
                self.sites,
                self.roles,
                self.users,
                self.memberships,
            )
        )


class DataSeeder:
    """Idempotent initial data seeder.

    Usage:
        seeder = DataSeeder(
            geo_repo=geo_repo,
            site_repo=site_repo,
            user_repo=user_repo,
            role_repo=role_repo,
            tenant_resolver=SiteTenantResolver(site_repo),
            password_service=get_password_service(),
            logger=get_logger(),
        )
        report = await seeder.run()
    """

    def __init__(
        self,
        geo_repo: GeographyRepository,
        site_repo: SiteRepository,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        tenant_resolver: TenantResolver,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
        admin_email: str = initial_data.DEFAULT_ADMIN_EMAIL,
        admin_user_name: str = initial_data.DEFAULT_ADMIN_USER_NAME,
        admin_password: str = initial_data.DEFAULT_ADMIN_PASSWORD,
    ) -> None:
        """Initialize seeder with its collaborators.

        Args:
            geo_repo: Reference geography store.
            site_repo: Site store.
            user_repo: User, role and membership store.
            role_repo: Tenant-scoped role counts.
            tenant_resolver: Resolves the tenant that scopes role/user counts.
            password_service: Hashes the initial administrator password.
            logger: Structured logger.
            admin_email: Initial administrator email.
            admin_user_name: Initial administrator login name.
            admin_password: Initial administrator password (plaintext, hashed
                only if the administrator is created).
        """
        self._geo_repo = geo_repo
        self._site_repo = site_repo
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._tenant_resolver = tenant_resolver
        self._password_service = password_service
        self._logger = logger.bind(component="data_seeder")
        self._admin_email = admin_email
        self._admin_user_name = admin_user_name
        self._admin_password = admin_password

    async def run(self) -> SeedReport:
        """Seed every category that is still empty.

        Returns:
            SeedReport describing what was inserted.

        Raises:
            SiteResolutionError: Roles or the administrator must be created
                but the tenant's site is not in the store.
            TenantResolutionError: The tenant resolver returned no tenant, or
                a tenant that does not identify the seeded site.
        """
        self._logger.info("seeding_started")

        countries, zones = await self._ensure_countries()
        languages = await self._ensure_languages()
        currencies = await self._ensure_currencies()
        created_site = await self._ensure_site()

        tenant_id = await self._tenant_resolver.resolve_tenant_id()
        if tenant_id is None:
            raise TenantResolutionError(
                "Tenant could not be resolved for role and user seeding",
                step="roles",
            )

        active_site: Site | None = None
        roles = 0
        if await self._role_repo.count_by_tenant(tenant_id) == 0:
            active_site = await self._resolve_site(
                tenant_id, created_site, step="roles"
            )
            roles = await self._create_default_roles(active_site)

        users = memberships = 0
        if await self._user_repo.count_by_tenant(tenant_id) == 0:
            active_site = active_site or await self._resolve_site(
                tenant_id, created_site, step="admin_user"
            )
            users, memberships = await self._create_admin_user(active_site)

        report = SeedReport(
            countries=countries,
            zones=zones,
            languages=languages,
            currencies=currencies,
            sites=1 if created_site else 0,
            roles=roles,
            users=users,
            memberships=memberships,
            site_id=active_site.id if active_site else None,
            tenant_id=tenant_id,
        )
        self._logger.info(
            "seeding_completed",
            seeded_anything=report.seeded_anything,
            countries=report.countries,
            zones=report.zones,
            languages=report.languages,
            currencies=report.currencies,
            sites=report.sites,
            roles=report.roles,
            users=report.users,
            memberships=report.memberships,
        )
        return report

    async def _ensure_countries(self) -> tuple[int, int]:
        if await self._geo_repo.count_countries() > 0:
            self._logger.debug("countries_present")
            return 0, 0

        countries = initial_data.build_country_list()
        for country in countries:
            await self._geo_repo.add_country(country)

        zones = initial_data.build_state_list()
        for zone in zones:
            await self._geo_repo.add_zone(zone)

        self._logger.info("countries_seeded", countries=len(countries), zones=len(zones))
        return len(countries), len(zones)

    async def _ensure_languages(self) -> int:
        if await self._geo_repo.count_languages() > 0:
            self._logger.debug("languages_present")
            return 0

        languages = initial_data.build_language_list()
        for language in languages:
            await self._geo_repo.add_language(language)

        self._logger.info("languages_seeded", languages=len(languages))
        return len(languages)

    async def _ensure_currencies(self) -> int:
        existing = await self._geo_repo.list_currencies()
        if existing:
            self._logger.debug("currencies_present", currencies=len(existing))
            return 0

        currencies = initial_data.build_currency_list()
        for currency in currencies:
            await self._geo_repo.add_currency(currency)

        self._logger.info("currencies_seeded", currencies=len(currencies))
        return len(currencies)

    async def _ensure_site(self) -> Site | None:
        if await self._site_repo.count() > 0:
            self._logger.debug("site_present")
            return None

        site = initial_data.build_initial_site()
        await self._site_repo.create(site)
        self._logger.info("site_created", site_id=str(site.id), alias_id=site.alias_id)
        return site

    async def _resolve_site(
        self, tenant_id: str, created_site: Site | None, *, step: str
    ) -> Site:
        """Find the site that owns the tenant's roles and users.

        Counts are scoped by tenant, so roles and users are written under the
        site the tenant identifies.

        Args:
            tenant_id: Resolved tenant id.
            created_site: Site created earlier in this run, if any.
            step: Seeding step that needs the site.

        Returns:
            The site whose tenant_id equals tenant_id.

        Raises:
            TenantResolutionError: If the tenant does not identify a site, or
                identifies a different site than the one created this run.
            SiteResolutionError: If the tenant's site is not in the store.
        """
        site = created_site
        site_id = site_id_from_tenant(tenant_id)
        if site is None and site_id is not None:
            site = await self._site_repo.find_by_id(site_id)
            if site is None:
                self._logger.error(
                    "site_resolution_failed", tenant_id=tenant_id, step=step
                )
                raise SiteResolutionError(
                    f"No site {tenant_id} available for seeding step {step!r}",
                    step=step,
                )
            self._logger.info("site_resolved", site_id=str(site.id), step=step)

        if site is None or site.tenant_id != tenant_id:
            self._logger.error(
                "tenant_site_mismatch",
                tenant_id=tenant_id,
                site_id=str(site.id) if site else None,
                step=step,
            )
            raise TenantResolutionError(
                f"Tenant {tenant_id!r} does not identify the seeded site",
                step=step,
            )
        return site

    async def _create_default_roles(self, site: Site) -> int:
        roles = initial_data.build_default_roles()
        for role in roles:
            role.site_id = site.id
            await self._user_repo.create_role(role)

        self._logger.info(
            "roles_seeded",
            site_id=str(site.id),
            roles=[role.role_name for role in roles],
        )
        return len(roles)

    async def _create_admin_user(self, site: Site) -> tuple[int, int]:
        admin_role = await self._user_repo.fetch_role(
            site.id, initial_data.ADMINISTRATORS_ROLE
        )
        if admin_role is None:
            self._logger.warning(
                "admin_user_skipped",
                site_id=str(site.id),
                missing_role=initial_data.ADMINISTRATORS_ROLE,
            )
            return 0, 0

        password_hash = self._password_service.hash_password(self._admin_password)
        admin = initial_data.build_initial_admin(
            password_hash,
            email=self._admin_email,
            user_name=self._admin_user_name,
        )
        admin.site_id = site.id
        await self._user_repo.create(admin)
        await self._user_repo.add_user_to_role(admin_role.id, admin.id)
        memberships = 1

        authenticated_role = await self._user_repo.fetch_role(
            site.id, initial_data.AUTHENTICATED_USERS_ROLE
        )
        if authenticated_role is not None:
            await self._user_repo.add_user_to_role(authenticated_role.id, admin.id)
            memberships += 1
        else:
            self._logger.warning(
                "membership_skipped",
                user_id=str(admin.id),
                missing_role=initial_data.AUTHENTICATED_USERS_ROLE,
            )

        self._logger.info(
            "admin_user_created",
            user_id=str(admin.id),
            site_id=str(site.id),
            memberships=memberships,
        )
        return 1, memberships
