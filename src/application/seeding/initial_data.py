"""Initial data for a fresh store.

Static reference data (countries, zones, languages, currencies) and the
default tenant set (first site, its four roles, the administrator account).
Builders return new entity instances with fresh ids on every call, so a list
can be inserted without being shared across runs.

Reference data is kept as plain tuples and turned into entities on demand.
"""

from uuid_extensions import uuid7

from src.domain.entities.currency import Currency
from src.domain.entities.geo_country import GeoCountry
from src.domain.entities.geo_zone import GeoZone
from src.domain.entities.language import Language
from src.domain.entities.role import Role
from src.domain.entities.site import Site
from src.domain.entities.user import User

ADMINISTRATORS_ROLE = "Administrators"
ROLE_ADMINISTRATORS_ROLE = "Role Admins"
CONTENT_ADMINISTRATORS_ROLE = "Content Administrators"
AUTHENTICATED_USERS_ROLE = "Authenticated Users"

DEFAULT_SITE_ALIAS = "s1"
DEFAULT_SITE_NAME = "Sample Site"

DEFAULT_ADMIN_EMAIL = "admin@admin.com"
DEFAULT_ADMIN_USER_NAME = "admin"
DEFAULT_ADMIN_DISPLAY_NAME = "Admin"
DEFAULT_ADMIN_PASSWORD = "admin"

# (name, iso_code2, iso_code3)
COUNTRIES: tuple[tuple[str, str, str], ...] = (
    ("Afghanistan", "AF", "AFG"),
    ("Åland Islands", "AX", "ALA"),
    ("Albania", "AL", "ALB"),
    ("Algeria", "DZ", "DZA"),
    ("American Samoa", "AS", "ASM"),
    ("Andorra", "AD", "AND"),
    ("Angola", "AO", "AGO"),
    ("Anguilla", "AI", "AIA"),
    ("Antarctica", "AQ", "ATA"),
    ("Antigua and Barbuda", "AG", "ATG"),
    ("Argentina", "AR", "ARG"),
    ("Armenia", "AM", "ARM"),
    ("Aruba", "AW", "ABW"),
    ("Australia", "AU", "AUS"),
    ("Austria", "AT", "AUT"),
    ("Azerbaijan", "AZ", "AZE"),
    ("Bahamas", "BS", "BHS"),
    ("Bahrain", "BH", "BHR"),
    ("Bangladesh", "BD", "BGD"),
    ("Barbados", "BB", "BRB"),
    ("Belarus", "BY", "BLR"),
    ("Belgium", "BE", "BEL"),
    ("Belize", "BZ", "BLZ"),
    ("Benin", "BJ", "BEN"),
    ("Bermuda", "BM", "BMU"),
    ("Bhutan", "BT", "BTN"),
    ("Bolivia", "BO", "BOL"),
    ("Bonaire, Sint Eustatius and Saba", "BQ", "BES"),
    ("Bosnia and Herzegovina", "BA", "BIH"),
    ("Botswana", "BW", "BWA"),
    ("Bouvet Island", "BV", "BVT"),
    ("Brazil", "BR", "BRA"),
    ("British Indian Ocean Territory", "IO", "IOT"),
    ("Brunei Darussalam", "BN", "BRN"),
    ("Bulgaria", "BG", "BGR"),
    ("Burkina Faso", "BF", "BFA"),
    ("Burundi", "BI", "BDI"),
    ("Cabo Verde", "CV", "CPV"),
    ("Cambodia", "KH", "KHM"),
    ("Cameroon", "CM", "CMR"),
    ("Canada", "CA", "CAN"),
    ("Cayman Islands", "KY", "CYM"),
    ("Central African Republic", "CF", "CAF"),
    ("Chad", "TD", "TCD"),
    ("Chile", "CL", "CHL"),
    ("China", "CN", "CHN"),
    ("Christmas Island", "CX", "CXR"),
    ("Cocos (Keeling) Islands", "CC", "CCK"),
    ("Colombia", "CO", "COL"),
    ("Comoros", "KM", "COM"),
    ("Congo", "CG", "COG"),
    ("Congo, Democratic Republic of the", "CD", "COD"),
    ("Cook Islands", "CK", "COK"),
    ("Costa Rica", "CR", "CRI"),
    ("Côte d'Ivoire", "CI", "CIV"),
    ("Croatia", "HR", "HRV"),
    ("Cuba", "CU", "CUB"),
    ("Curaçao", "CW", "CUW"),
    ("Cyprus", "CY", "CYP"),
    ("Czechia", "CZ", "CZE"),
    ("Denmark", "DK", "DNK"),
    ("Djibouti", "DJ", "DJI"),
    ("Dominica", "DM", "DMA"),
    ("Dominican Republic", "DO", "DOM"),
    ("Ecuador", "EC", "ECU"),
    ("Egypt", "EG", "EGY"),
    ("El Salvador", "SV", "SLV"),
    ("Equatorial Guinea", "GQ", "GNQ"),
    ("Eritrea", "ER", "ERI"),
    ("Estonia", "EE", "EST"),
    ("Eswatini", "SZ", "SWZ"),
    ("Ethiopia", "ET", "ETH"),
    ("Falkland Islands (Malvinas)", "FK", "FLK"),
    ("Faroe Islands", "FO", "FRO"),
    ("Fiji", "FJ", "FJI"),
    ("Finland", "FI", "FIN"),
    ("France", "FR", "FRA"),
    ("French Guiana", "GF", "GUF"),
    ("French Polynesia", "PF", "PYF"),
    ("French Southern Territories", "TF", "ATF"),
    ("Gabon", "GA", "GAB"),
    ("Gambia", "GM", "GMB"),
    ("Georgia", "GE", "GEO"),
    ("Germany", "DE", "DEU"),
    ("Ghana", "GH", "GHA"),
    ("Gibraltar", "GI", "GIB"),
    ("Greece", "GR", "GRC"),
    ("Greenland", "GL", "GRL"),
    ("Grenada", "GD", "GRD"),
    ("Guadeloupe", "GP", "GLP"),
    ("Guam", "GU", "GUM"),
    ("Guatemala", "GT", "GTM"),
    ("Guernsey", "GG", "GGY"),
    ("Guinea", "GN", "GIN"),
    ("Guinea-Bissau", "GW", "GNB"),
    ("Guyana", "GY", "GUY"),
    ("Haiti", "HT", "HTI"),
    ("Heard Island and McDonald Islands", "HM", "HMD"),
    ("Holy See", "VA", "VAT"),
    ("Honduras", "HN", "HND"),
    ("Hong Kong", "HK", "HKG"),
    ("Hungary", "HU", "HUN"),
    ("Iceland", "IS", "ISL"),
    ("India", "IN", "IND"),
    ("Indonesia", "ID", "IDN"),
    ("Iran", "IR", "IRN"),
    ("Iraq", "IQ", "IRQ"),
    ("Ireland", "IE", "IRL"),
    ("Isle of Man", "IM", "IMN"),
    ("Israel", "IL", "ISR"),
    ("Italy", "IT", "ITA"),
    ("Jamaica", "JM", "JAM"),
    ("Japan", "JP", "JPN"),
    ("Jersey", "JE", "JEY"),
    ("Jordan", "JO", "JOR"),
    ("Kazakhstan", "KZ", "KAZ"),
    ("Kenya", "KE", "KEN"),
    ("Kiribati", "KI", "KIR"),
    ("Korea, Democratic People's Republic of", "KP", "PRK"),
    ("Korea, Republic of", "KR", "KOR"),
    ("Kuwait", "KW", "KWT"),
    ("Kyrgyzstan", "KG", "KGZ"),
    ("Lao People's Democratic Republic", "LA", "LAO"),
    ("Latvia", "LV", "LVA"),
    ("Lebanon", "LB", "LBN"),
    ("Lesotho", "LS", "LSO"),
    ("Liberia", "LR", "LBR"),
    ("Libya", "LY", "LBY"),
    ("Liechtenstein", "LI", "LIE"),
    ("Lithuania", "LT", "LTU"),
    ("Luxembourg", "LU", "LUX"),
    ("Macao", "MO", "MAC"),
    ("Madagascar", "MG", "MDG"),
    ("Malawi", "MW", "MWI"),
    ("Malaysia", "MY", "MYS"),
    ("Maldives", "MV", "MDV"),
    ("Mali", "ML", "MLI"),
    ("Malta", "MT", "MLT"),
    ("Marshall Islands", "MH", "MHL"),
    ("Martinique", "MQ", "MTQ"),
    ("Mauritania", "MR", "MRT"),
    ("Mauritius", "MU", "MUS"),
    ("Mayotte", "YT", "MYT"),
    ("Mexico", "MX", "MEX"),
    ("Micronesia", "FM", "FSM"),
    ("Moldova", "MD", "MDA"),
    ("Monaco", "MC", "MCO"),
    ("Mongolia", "MN", "MNG"),
    ("Montenegro", "ME", "MNE"),
    ("Montserrat", "MS", "MSR"),
    ("Morocco", "MA", "MAR"),
    ("Mozambique", "MZ", "MOZ"),
    ("Myanmar", "MM", "MMR"),
    ("Namibia", "NA", "NAM"),
    ("Nauru", "NR", "NRU"),
    ("Nepal", "NP", "NPL"),
    ("Netherlands", "NL", "NLD"),
    ("New Caledonia", "NC", "NCL"),
    ("New Zealand", "NZ", "NZL"),
    ("Nicaragua", "NI", "NIC"),
    ("Niger", "NE", "NER"),
    ("Nigeria", "NG", "NGA"),
    ("Niue", "NU", "NIU"),
    ("Norfolk Island", "NF", "NFK"),
    ("North Macedonia", "MK", "MKD"),
    ("Northern Mariana Islands", "MP", "MNP"),
    ("Norway", "NO", "NOR"),
    ("Oman", "OM", "OMN"),
    ("Pakistan", "PK", "PAK"),
    ("Palau", "PW", "PLW"),
    ("Palestine, State of", "PS", "PSE"),
    ("Panama", "PA", "PAN"),
    ("Papua New Guinea", "PG", "PNG"),
    ("Paraguay", "PY", "PRY"),
    ("Peru", "PE", "PER"),
    ("Philippines", "PH", "PHL"),
    ("Pitcairn", "PN", "PCN"),
    ("Poland", "PL", "POL"),
    ("Portugal", "PT", "PRT"),
    ("Puerto Rico", "PR", "PRI"),
    ("Qatar", "QA", "QAT"),
    ("Réunion", "RE", "REU"),
    ("Romania", "RO", "ROU"),
    ("Russian Federation", "RU", "RUS"),
    ("Rwanda", "RW", "RWA"),
    ("Saint Barthélemy", "BL", "BLM"),
    ("Saint Helena, Ascension and Tristan da Cunha", "SH", "SHN"),
    ("Saint Kitts and Nevis", "KN", "KNA"),
    ("Saint Lucia", "LC", "LCA"),
    ("Saint Martin (French part)", "MF", "MAF"),
    ("Saint Pierre and Miquelon", "PM", "SPM"),
    ("Saint Vincent and the Grenadines", "VC", "VCT"),
    ("Samoa", "WS", "WSM"),
    ("San Marino", "SM", "SMR"),
    ("Sao Tome and Principe", "ST", "STP"),
    ("Saudi Arabia", "SA", "SAU"),
    ("Senegal", "SN", "SEN"),
    ("Serbia", "RS", "SRB"),
    ("Seychelles", "SC", "SYC"),
    ("Sierra Leone", "SL", "SLE"),
    ("Singapore", "SG", "SGP"),
    ("Sint Maarten (Dutch part)", "SX", "SXM"),
    ("Slovakia", "SK", "SVK"),
    ("Slovenia", "SI", "SVN"),
    ("Solomon Islands", "SB", "SLB"),
    ("Somalia", "SO", "SOM"),
    ("South Africa", "ZA", "ZAF"),
    ("South Georgia and the South Sandwich Islands", "GS", "SGS"),
    ("South Sudan", "SS", "SSD"),
    ("Spain", "ES", "ESP"),
    ("Sri Lanka", "LK", "LKA"),
    ("Sudan", "SD", "SDN"),
    ("Suriname", "SR", "SUR"),
    ("Svalbard and Jan Mayen", "SJ", "SJM"),
    ("Sweden", "SE", "SWE"),
    ("Switzerland", "CH", "CHE"),
    ("Syrian Arab Republic", "SY", "SYR"),
    ("Taiwan", "TW", "TWN"),
    ("Tajikistan", "TJ", "TJK"),
    ("Tanzania, United Republic of", "TZ", "TZA"),
    ("Thailand", "TH", "THA"),
    ("Timor-Leste", "TL", "TLS"),
    ("Togo", "TG", "TGO"),
    ("Tokelau", "TK", "TKL"),
    ("Tonga", "TO", "TON"),
    ("Trinidad and Tobago", "TT", "TTO"),
    ("Tunisia", "TN", "TUN"),
    ("Türkiye", "TR", "TUR"),
    ("Turkmenistan", "TM", "TKM"),
    ("Turks and Caicos Islands", "TC", "TCA"),
    ("Tuvalu", "TV", "TUV"),
    ("Uganda", "UG", "UGA"),
    ("Ukraine", "UA", "UKR"),
    ("United Arab Emirates", "AE", "ARE"),
    ("United Kingdom", "GB", "GBR"),
    ("United States", "US", "USA"),
    ("United States Minor Outlying Islands", "UM", "UMI"),
    ("Uruguay", "UY", "URY"),
    ("Uzbekistan", "UZ", "UZB"),
    ("Vanuatu", "VU", "VUT"),
    ("Venezuela", "VE", "VEN"),
    ("Viet Nam", "VN", "VNM"),
    ("Virgin Islands (British)", "VG", "VGB"),
    ("Virgin Islands (U.S.)", "VI", "VIR"),
    ("Wallis and Futuna", "WF", "WLF"),
    ("Western Sahara", "EH", "ESH"),
    ("Yemen", "YE", "YEM"),
    ("Zambia", "ZM", "ZMB"),
    ("Zimbabwe", "ZW", "ZWE"),
)

# (country iso_code2, name, code)
STATES: tuple[tuple[str, str, str], ...] = (
    ("US", "Alabama", "AL"),
    ("US", "Alaska", "AK"),
    ("US", "American Samoa", "AS"),
    ("US", "Arizona", "AZ"),
    ("US", "Arkansas", "AR"),
    ("US", "Armed Forces Americas", "AA"),
    ("US", "Armed Forces Europe", "AE"),
    ("US", "Armed Forces Pacific", "AP"),
    ("US", "California", "CA"),
    ("US", "Colorado", "CO"),
    ("US", "Connecticut", "CT"),
    ("US", "Delaware", "DE"),
    ("US", "District of Columbia", "DC"),
    ("US", "Florida", "FL"),
    ("US", "Georgia", "GA"),
    ("US", "Guam", "GU"),
    ("US", "Hawaii", "HI"),
    ("US", "Idaho", "ID"),
    ("US", "Illinois", "IL"),
    ("US", "Indiana", "IN"),
    ("US", "Iowa", "IA"),
    ("US", "Kansas", "KS"),
    ("US", "Kentucky", "KY"),
    ("US", "Louisiana", "LA"),
    ("US", "Maine", "ME"),
    ("US", "Maryland", "MD"),
    ("US", "Massachusetts", "MA"),
    ("US", "Michigan", "MI"),
    ("US", "Minnesota", "MN"),
    ("US", "Mississippi", "MS"),
    ("US", "Missouri", "MO"),
    ("US", "Montana", "MT"),
    ("US", "Nebraska", "NE"),
    ("US", "Nevada", "NV"),
    ("US", "New Hampshire", "NH"),
    ("US", "New Jersey", "NJ"),
    ("US", "New Mexico", "NM"),
    ("US", "New York", "NY"),
    ("US", "North Carolina", "NC"),
    ("US", "North Dakota", "ND"),
    ("US", "Northern Mariana Islands", "MP"),
    ("US", "Ohio", "OH"),
    ("US", "Oklahoma", "OK"),
    ("US", "Oregon", "OR"),
    ("US", "Pennsylvania", "PA"),
    ("US", "Puerto Rico", "PR"),
    ("US", "Rhode Island", "RI"),
    ("US", "South Carolina", "SC"),
    ("US", "South Dakota", "SD"),
    ("US", "Tennessee", "TN"),
    ("US", "Texas", "TX"),
    ("US", "U.S. Virgin Islands", "VI"),
    ("US", "Utah", "UT"),
    ("US", "Vermont", "VT"),
    ("US", "Virginia", "VA"),
    ("US", "Washington", "WA"),
    ("US", "West Virginia", "WV"),
    ("US", "Wisconsin", "WI"),
    ("US", "Wyoming", "WY"),
    ("CA", "Alberta", "AB"),
    ("CA", "British Columbia", "BC"),
    ("CA", "Manitoba", "MB"),
    ("CA", "New Brunswick", "NB"),
    ("CA", "Newfoundland and Labrador", "NL"),
    ("CA", "Northwest Territories", "NT"),
    ("CA", "Nova Scotia", "NS"),
    ("CA", "Nunavut", "NU"),
    ("CA", "Ontario", "ON"),
    ("CA", "Prince Edward Island", "PE"),
    ("CA", "Quebec", "QC"),
    ("CA", "Saskatchewan", "SK"),
    ("CA", "Yukon", "YT"),
)

# (name, iso 639-1 code, sort_rank)
LANGUAGES: tuple[tuple[str, str, int], ...] = (
    ("English", "en", 1),
    ("Spanish", "es", 2),
    ("French", "fr", 3),
    ("German", "de", 4),
    ("Portuguese", "pt", 5),
    ("Italian", "it", 6),
    ("Dutch", "nl", 7),
    ("Russian", "ru", 8),
    ("Chinese", "zh", 9),
    ("Japanese", "ja", 10),
    ("Korean", "ko", 11),
    ("Arabic", "ar", 12),
    ("Hindi", "hi", 13),
    ("Turkish", "tr", 14),
    ("Polish", "pl", 15),
    ("Swedish", "sv", 16),
)

# (code, name, symbol, culture_code)
CURRENCIES: tuple[tuple[str, str, str, str], ...] = (
    ("USD", "US Dollar", "$", "en-US"),
    ("EUR", "Euro", "€", "fr-FR"),
    ("GBP", "Pound Sterling", "£", "en-GB"),
    ("CAD", "Canadian Dollar", "$", "en-CA"),
    ("AUD", "Australian Dollar", "$", "en-AU"),
    ("JPY", "Yen", "¥", "ja-JP"),
    ("CHF", "Swiss Franc", "CHF", "de-CH"),
    ("CNY", "Yuan Renminbi", "¥", "zh-CN"),
    ("INR", "Indian Rupee", "₹", "hi-IN"),
    ("MXN", "Mexican Peso", "$", "es-MX"),
    ("BRL", "Brazilian Real", "R$", "pt-BR"),
    ("SEK", "Swedish Krona", "kr", "sv-SE"),
    ("NOK", "Norwegian Krone", "kr", "nb-NO"),
    ("DKK", "Danish Krone", "kr", "da-DK"),
    ("NZD", "New Zealand Dollar", "$", "en-NZ"),
    ("ZAR", "Rand", "R", "en-ZA"),
)


def build_country_list() -> list[GeoCountry]:
    """Build the ISO 3166-1 country list.

    Returns:
        New GeoCountry instances in alphabetical order.
    """
    return [
        GeoCountry(id=uuid7(), name=name, iso_code2=code2, iso_code3=code3)
        for name, code2, code3 in COUNTRIES
    ]


def build_state_list() -> list[GeoZone]:
    """Build the US state and Canadian province list.

    Returns:
        New GeoZone instances, US first then Canada.
    """
    return [
        GeoZone(id=uuid7(), country_code=country, name=name, code=code)
        for country, name, code in STATES
    ]


def build_language_list() -> list[Language]:
    """Build the language list.

    Returns:
        New Language instances ordered by sort rank.
    """
    return [
        Language(id=uuid7(), name=name, code=code, sort_rank=rank)
        for name, code, rank in LANGUAGES
    ]


def build_currency_list() -> list[Currency]:
    """Build the currency list.

    Returns:
        New Currency instances.
    """
    return [
        Currency(
            id=uuid7(),
            code=code,
            name=name,
            symbol=symbol,
            culture_code=culture,
        )
        for code, name, symbol, culture in CURRENCIES
    ]


def build_initial_site() -> Site:
    """Build the first site of a new installation.

    Returns:
        Server admin site with a fresh id.
    """
    return Site(
        id=uuid7(),
        alias_id=DEFAULT_SITE_ALIAS,
        site_name=DEFAULT_SITE_NAME,
        is_server_admin_site=True,
    )


def _build_role(role_name: str) -> Role:
    return Role(id=uuid7(), site_id=None, role_name=role_name)


def build_admin_role() -> Role:
    """Build the Administrators role (site_id unset)."""
    return _build_role(ADMINISTRATORS_ROLE)


def build_role_admin_role() -> Role:
    """Build the Role Admins role (site_id unset)."""
    return _build_role(ROLE_ADMINISTRATORS_ROLE)


def build_content_admins_role() -> Role:
    """Build the Content Administrators role (site_id unset)."""
    return _build_role(CONTENT_ADMINISTRATORS_ROLE)


def build_authenticated_role() -> Role:
    """Build the Authenticated Users role (site_id unset)."""
    return _build_role(AUTHENTICATED_USERS_ROLE)


def build_default_roles() -> list[Role]:
    """Build the four default roles in creation order.

    Returns:
        Administrators, Role Admins, Content Administrators,
        Authenticated Users.
    """
    return [
        build_admin_role(),
        build_role_admin_role(),
        build_content_admins_role(),
        build_authenticated_role(),
    ]


def build_initial_admin(
    password_hash: str,
    email: str = DEFAULT_ADMIN_EMAIL,
    user_name: str = DEFAULT_ADMIN_USER_NAME,
) -> User:
    """Build the initial administrator account (site_id unset).

    The account is approved and confirmed so it can sign in immediately, and
    must change its password at first login.

    Args:
        password_hash: Hash of the initial password.
        email: Administrator email.
        user_name: Administrator login name.

    Returns:
        New User instance.
    """
    return User(
        id=uuid7(),
        site_id=None,
        email=email,
        user_name=user_name,
        display_name=DEFAULT_ADMIN_DISPLAY_NAME,
        password_hash=password_hash,
        email_confirmed=True,
        must_change_password=True,
        account_approved=True,
    )
