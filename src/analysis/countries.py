"""Country name resolution and flag lookup for player nationalities."""

import unicodedata
from typing import Optional


# Neutral glyph shown for unrecognised nationalities
FALLBACK_FLAG = "🏳️"

# Canonical country name -> ISO 3166-1 alpha-2 code
COUNTRY_CODES: dict[str, str] = {
    "Afghanistan": "AF",
    "Albania": "AL",
    "Algeria": "DZ",
    "Andorra": "AD",
    "Angola": "AO",
    "Antigua and Barbuda": "AG",
    "Argentina": "AR",
    "Armenia": "AM",
    "Australia": "AU",
    "Austria": "AT",
    "Azerbaijan": "AZ",
    "Bahamas": "BS",
    "Bahrain": "BH",
    "Bangladesh": "BD",
    "Barbados": "BB",
    "Belarus": "BY",
    "Belgium": "BE",
    "Belize": "BZ",
    "Benin": "BJ",
    "Bhutan": "BT",
    "Bolivia": "BO",
    "Bosnia and Herzegovina": "BA",
    "Botswana": "BW",
    "Brazil": "BR",
    "Brunei": "BN",
    "Bulgaria": "BG",
    "Burkina Faso": "BF",
    "Burundi": "BI",
    "Cambodia": "KH",
    "Cameroon": "CM",
    "Canada": "CA",
    "Cape Verde": "CV",
    "Central African Republic": "CF",
    "Chad": "TD",
    "Chile": "CL",
    "China": "CN",
    "Colombia": "CO",
    "Comoros": "KM",
    "Congo": "CG",
    "Costa Rica": "CR",
    "Croatia": "HR",
    "Cuba": "CU",
    "Curacao": "CW",
    "Cyprus": "CY",
    "Czech Republic": "CZ",
    "DR Congo": "CD",
    "Denmark": "DK",
    "Djibouti": "DJ",
    "Dominica": "DM",
    "Dominican Republic": "DO",
    "Ecuador": "EC",
    "Egypt": "EG",
    "El Salvador": "SV",
    "Equatorial Guinea": "GQ",
    "Eritrea": "ER",
    "Estonia": "EE",
    "Eswatini": "SZ",
    "Ethiopia": "ET",
    "Faroe Islands": "FO",
    "Fiji": "FJ",
    "Finland": "FI",
    "France": "FR",
    "Gabon": "GA",
    "Gambia": "GM",
    "Georgia": "GE",
    "Germany": "DE",
    "Ghana": "GH",
    "Gibraltar": "GI",
    "Greece": "GR",
    "Grenada": "GD",
    "Guatemala": "GT",
    "Guinea": "GN",
    "Guinea-Bissau": "GW",
    "Guyana": "GY",
    "Haiti": "HT",
    "Honduras": "HN",
    "Hong Kong": "HK",
    "Hungary": "HU",
    "Iceland": "IS",
    "India": "IN",
    "Indonesia": "ID",
    "Iran": "IR",
    "Iraq": "IQ",
    "Ireland": "IE",
    "Israel": "IL",
    "Italy": "IT",
    "Ivory Coast": "CI",
    "Jamaica": "JM",
    "Japan": "JP",
    "Jordan": "JO",
    "Kazakhstan": "KZ",
    "Kenya": "KE",
    "Kosovo": "XK",
    "Kuwait": "KW",
    "Kyrgyzstan": "KG",
    "Laos": "LA",
    "Latvia": "LV",
    "Lebanon": "LB",
    "Lesotho": "LS",
    "Liberia": "LR",
    "Libya": "LY",
    "Liechtenstein": "LI",
    "Lithuania": "LT",
    "Luxembourg": "LU",
    "Madagascar": "MG",
    "Malawi": "MW",
    "Malaysia": "MY",
    "Maldives": "MV",
    "Mali": "ML",
    "Malta": "MT",
    "Mauritania": "MR",
    "Mauritius": "MU",
    "Mexico": "MX",
    "Moldova": "MD",
    "Monaco": "MC",
    "Mongolia": "MN",
    "Montenegro": "ME",
    "Morocco": "MA",
    "Mozambique": "MZ",
    "Myanmar": "MM",
    "Namibia": "NA",
    "Nepal": "NP",
    "Netherlands": "NL",
    "New Zealand": "NZ",
    "Nicaragua": "NI",
    "Niger": "NE",
    "Nigeria": "NG",
    "North Korea": "KP",
    "North Macedonia": "MK",
    "Northern Ireland": "GB",
    "Norway": "NO",
    "Oman": "OM",
    "Pakistan": "PK",
    "Palestine": "PS",
    "Panama": "PA",
    "Papua New Guinea": "PG",
    "Paraguay": "PY",
    "Peru": "PE",
    "Philippines": "PH",
    "Poland": "PL",
    "Portugal": "PT",
    "Puerto Rico": "PR",
    "Qatar": "QA",
    "Romania": "RO",
    "Russia": "RU",
    "Rwanda": "RW",
    "Saint Kitts and Nevis": "KN",
    "Saint Lucia": "LC",
    "Saint Vincent and the Grenadines": "VC",
    "Samoa": "WS",
    "San Marino": "SM",
    "Sao Tome and Principe": "ST",
    "Saudi Arabia": "SA",
    "Senegal": "SN",
    "Serbia": "RS",
    "Seychelles": "SC",
    "Sierra Leone": "SL",
    "Singapore": "SG",
    "Slovakia": "SK",
    "Slovenia": "SI",
    "Solomon Islands": "SB",
    "Somalia": "SO",
    "South Africa": "ZA",
    "South Korea": "KR",
    "South Sudan": "SS",
    "Spain": "ES",
    "Sri Lanka": "LK",
    "Sudan": "SD",
    "Suriname": "SR",
    "Sweden": "SE",
    "Switzerland": "CH",
    "Syria": "SY",
    "Taiwan": "TW",
    "Tajikistan": "TJ",
    "Tanzania": "TZ",
    "Thailand": "TH",
    "Togo": "TG",
    "Tonga": "TO",
    "Trinidad and Tobago": "TT",
    "Tunisia": "TN",
    "Turkey": "TR",
    "Turkmenistan": "TM",
    "Uganda": "UG",
    "Ukraine": "UA",
    "United Arab Emirates": "AE",
    "United Kingdom": "GB",
    "United States": "US",
    "Uruguay": "UY",
    "Uzbekistan": "UZ",
    "Vanuatu": "VU",
    "Venezuela": "VE",
    "Vietnam": "VN",
    "Yemen": "YE",
    "Zambia": "ZM",
    "Zimbabwe": "ZW",
    # UK home nations use subdivision flags, see HOME_NATION_FLAGS
    "England": "GB",
    "Scotland": "GB",
    "Wales": "GB",
}

# Tag-sequence flags for nations without their own ISO code
HOME_NATION_FLAGS: dict[str, str] = {
    "England": "\U0001F3F4\U000E0067\U000E0062\U000E0065\U000E006E\U000E0067\U000E007F",
    "Scotland": "\U0001F3F4\U000E0067\U000E0062\U000E0073\U000E0063\U000E0074\U000E007F",
    "Wales": "\U0001F3F4\U000E0067\U000E0062\U000E0077\U000E006C\U000E0073\U000E007F",
}

# Common alternative spellings -> canonical name
COUNTRY_ALIASES: dict[str, str] = {
    "USA": "United States",
    "US": "United States",
    "U.S.": "United States",
    "U.S.A.": "United States",
    "United States of America": "United States",
    "America": "United States",
    "UK": "United Kingdom",
    "Great Britain": "United Kingdom",
    "Britain": "United Kingdom",
    "Holland": "Netherlands",
    "The Netherlands": "Netherlands",
    "Korea": "South Korea",
    "Korea Republic": "South Korea",
    "Republic of Korea": "South Korea",
    "Korea DPR": "North Korea",
    "Cote d'Ivoire": "Ivory Coast",
    "Czechia": "Czech Republic",
    "Turkiye": "Turkey",
    "Macedonia": "North Macedonia",
    "Swaziland": "Eswatini",
    "Cabo Verde": "Cape Verde",
    "Burma": "Myanmar",
    "Republic of Ireland": "Ireland",
    "Eire": "Ireland",
    "Democratic Republic of the Congo": "DR Congo",
    "Congo DR": "DR Congo",
    "Republic of the Congo": "Congo",
    "UAE": "United Arab Emirates",
    "Bosnia": "Bosnia and Herzegovina",
    "Trinidad": "Trinidad and Tobago",
    "Persia": "Iran",
    "IR Iran": "Iran",
    "Viet Nam": "Vietnam",
}


def _normalize(text: Optional[str]) -> str:
    """Casefold, strip accents and collapse whitespace for lookup."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    # Curly apostrophes, as in "Côte d’Ivoire"
    stripped = stripped.replace("’", "'")
    return " ".join(stripped.split()).casefold()


def _build_lookup() -> dict[str, str]:
    """Build the normalized name -> canonical name table."""
    lookup = {_normalize(name): name for name in COUNTRY_CODES}
    for alias, canonical in COUNTRY_ALIASES.items():
        lookup[_normalize(alias)] = canonical
    return lookup


_LOOKUP = _build_lookup()


def resolve_country(text: Optional[str]) -> Optional[str]:
    """
    Resolve free text to a canonical country name.

    Args:
        text: User-entered nationality.

    Returns:
        Canonical country name, or None if not recognised.
    """
    return _LOOKUP.get(_normalize(text))


def is_valid_country(text: Optional[str]) -> bool:
    """Check if text names a recognised country."""
    return resolve_country(text) is not None


def code_to_flag(code: str) -> str:
    """Convert an ISO alpha-2 code to its regional indicator flag."""
    return "".join(chr(0x1F1E6 + ord(c) - ord("A")) for c in code.upper())


def get_country_flag(text: Optional[str]) -> str:
    """
    Get the flag glyph for a nationality.

    Args:
        text: User-entered nationality.

    Returns:
        Flag emoji, or FALLBACK_FLAG if the country is not recognised.
    """
    country = resolve_country(text)
    if country is None:
        return FALLBACK_FLAG
    if country in HOME_NATION_FLAGS:
        return HOME_NATION_FLAGS[country]
    return code_to_flag(COUNTRY_CODES[country])


def country_names() -> list[str]:
    """Return the canonical country names, sorted."""
    return sorted(COUNTRY_CODES)


def suggest_countries(text: Optional[str], limit: int = 5) -> list[str]:
    """
    Suggest canonical names for unrecognised input.

    Names starting with the input come first, then names containing it.

    Args:
        text: User-entered nationality.
        limit: Maximum number of suggestions.

    Returns:
        Matching canonical names, in alphabetical order within each group.
    """
    needle = _normalize(text)
    if not needle:
        return []
    prefix = []
    contains = []
    for name in country_names():
        normalized = _normalize(name)
        if normalized.startswith(needle):
            prefix.append(name)
        elif needle in normalized:
            contains.append(name)
    return (prefix + contains)[:limit]
