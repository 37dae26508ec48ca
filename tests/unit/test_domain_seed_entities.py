"""Unit tests for seeding domain entities.

Tests cover:
- Reference entities (GeoCountry, GeoZone, Language, Currency)
- Site validation and tenant id mapping
- Role and User normalization
- Validation errors
"""

from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.domain.entities import (
    Currency,
    GeoCountry,
    GeoZone,
    Language,
    Role,
    Site,
    User,
)
from src.domain.entities.site import site_id_from_tenant


@pytest.mark.unit
class TestReferenceEntities:
    """Test geography reference entities."""

    def test_country_uppercases_iso_codes(self):
        """Test ISO codes are stored upper-cased."""
        country = GeoCountry(id=uuid7(), name="Canada", iso_code2="ca", iso_code3="can")

        assert country.iso_code2 == "CA"
        assert country.iso_code3 == "CAN"

    @pytest.mark.parametrize(
        ("iso_code2", "iso_code3"),
        [("C", "CAN"), ("CAN", "CAN"), ("CA", "CA"), ("C1", "CAN")],
    )
    def test_country_rejects_bad_iso_codes(self, iso_code2, iso_code3):
        """Test malformed ISO codes raise ValueError."""
        with pytest.raises(ValueError, match="iso_code"):
            GeoCountry(id=uuid7(), name="Canada", iso_code2=iso_code2, iso_code3=iso_code3)

    def test_country_rejects_empty_name(self):
        """Test empty country name raises ValueError."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            GeoCountry(id=uuid7(), name="", iso_code2="CA", iso_code3="CAN")

    def test_zone_uppercases_country_code(self):
        """Test zone country code is upper-cased."""
        zone = GeoZone(id=uuid7(), country_code="ca", name="Ontario", code="ON")

        assert zone.country_code == "CA"

    def test_zone_requires_code(self):
        """Test zone abbreviation is required."""
        with pytest.raises(ValueError, match="code cannot be empty"):
            GeoZone(id=uuid7(), country_code="US", name="Texas", code="")

    def test_language_lowercases_code_and_defaults_rank(self):
        """Test language code is lower-cased and rank defaults to 1."""
        language = Language(id=uuid7(), name="French", code="FR")

        assert language.code == "fr"
        assert language.sort_rank == 1

    def test_language_rejects_three_letter_code(self):
        """Test only ISO 639-1 codes are accepted."""
        with pytest.raises(ValueError, match="ISO 639-1"):
            Language(id=uuid7(), name="French", code="fra")

    def test_currency_uppercases_code(self):
        """Test currency code is upper-cased; symbol defaults empty."""
        currency = Currency(id=uuid7(), code="eur", name="Euro")

        assert currency.code == "EUR"
        assert currency.symbol == ""
        assert currency.culture_code == ""

    def test_currency_rejects_bad_code(self):
        """Test non ISO 4217 codes raise ValueError."""
        with pytest.raises(ValueError, match="ISO 4217"):
            Currency(id=uuid7(), code="EU", name="Euro")


@pytest.mark.unit
class TestSite:
    """Test Site entity."""

    def test_tenant_id_is_site_id_string(self):
        """Test a site's tenant id is the string form of its id."""
        site = Site(id=uuid7(), alias_id="s1", site_name="Sample Site")

        assert site.tenant_id == str(site.id)
        assert site_id_from_tenant(site.tenant_id) == site.id

    def test_defaults(self):
        """Test optional fields default sensibly."""
        site = Site(id=uuid7(), alias_id="s1", site_name="Sample Site")

        assert site.is_server_admin_site is False
        assert site.theme is None
        assert site.created_at.tzinfo is not None

    @pytest.mark.parametrize("tenant_id", ["", "tenant-1", "1234"])
    def test_site_id_from_non_uuid_tenant_is_none(self, tenant_id):
        """Test tenant ids that are not UUIDs map to no site."""
        assert site_id_from_tenant(tenant_id) is None

    def test_site_id_from_uuid_tenant(self):
        """Test UUID tenant strings parse to the same UUID."""
        value = "0192f1c4-7a2e-7c3d-9b1a-5f6e7d8c9b0a"

        assert site_id_from_tenant(value) == UUID(value)

    def test_rejects_empty_alias(self):
        """Test alias is required."""
        with pytest.raises(ValueError, match="alias_id cannot be empty"):
            Site(id=uuid7(), alias_id="", site_name="Sample Site")

    def test_rejects_long_alias(self):
        """Test alias length is bounded."""
        with pytest.raises(ValueError, match="36 characters"):
            Site(id=uuid7(), alias_id="a" * 37, site_name="Sample Site")


@pytest.mark.unit
class TestRoleAndUser:
    """Test Role and User entities."""

    def test_role_normalizes_name(self):
        """Test normalized role name defaults to the upper-cased name."""
        role = Role(id=uuid7(), site_id=None, role_name="Content Administrators")

        assert role.normalized_role_name == "CONTENT ADMINISTRATORS"
        assert str(role) == "Content Administrators"

    def test_role_rejects_long_name(self):
        """Test role names are bounded."""
        with pytest.raises(ValueError, match="50 characters"):
            Role(id=uuid7(), site_id=None, role_name="r" * 51)

    def test_user_normalizes_email_and_name(self):
        """Test normalized lookup fields are upper-cased."""
        user = User(
            id=uuid7(),
            site_id=None,
            email="admin@admin.com",
            user_name="admin",
            display_name="Admin",
            password_hash="$2b$10$hash",
        )

        assert user.normalized_email == "ADMIN@ADMIN.COM"
        assert user.normalized_user_name == "ADMIN"
        assert user.account_approved is True
        assert user.email_confirmed is False

    def test_user_repr_omits_password_hash(self):
        """Test the hash never appears in repr."""
        user = User(
            id=uuid7(),
            site_id=None,
            email="admin@admin.com",
            user_name="admin",
            display_name="Admin",
            password_hash="$2b$10$secret",
        )

        assert "$2b$10$secret" not in repr(user)

    def test_user_rejects_invalid_email(self):
        """Test email must contain @."""
        with pytest.raises(ValueError, match="email"):
            User(
                id=uuid7(),
                site_id=None,
                email="admin",
                user_name="admin",
                display_name="Admin",
                password_hash="hash",
            )
