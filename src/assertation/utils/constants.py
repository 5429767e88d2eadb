"""
Constants for the assertation engine.

This module centralizes the rule-expression grammar, configuration keys,
and repeated literals used throughout the codebase.

The constants are organized into logical groups:
- RULE_SYNTAX: Operators of the rule-expression mini-language
- ENV_VARS: Environment variable names
- ERROR_MESSAGES: Error messages and exception strings
- DEFAULTS: Default values
- ISO_CODES: Currency and country code tables
"""

from typing import FrozenSet


# =============================================================================
# RULE SYNTAX
# =============================================================================
class RuleSyntax:
    """Operators of the rule-expression mini-language."""

    OR = "|"
    AND = ";"
    ARG = ","
    SENSITIVE_PREFIX = "#"


# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================
class EnvVars:
    """Environment variable names used throughout the library."""

    THROW_EARLY = "ASSERTATION_THROW_EARLY"
    MESSAGES_FILE = "ASSERTATION_MESSAGES_FILE"
    LOCALE = "ASSERTATION_LOCALE"
    LOGGING_LEVEL = "ASSERTATION_LOGGING_LEVEL"
    LOGGING_FORMAT = "ASSERTATION_LOGGING_FORMAT"


# =============================================================================
# DEFAULTS
# =============================================================================
class Defaults:
    """Default values."""

    GENERAL_ATTRIBUTE = "general"
    VALIDATE_MESSAGE_KEY = "validate"
    VALIDATE_MESSAGE = "Validation check failed"
    TRUNCATE_END = "..."
    LOGGING_LEVEL = "warning"
    LOGGING_FORMAT = "text"
    CARD_NUMBER_MIN_LENGTH = 8
    CARD_NUMBER_MAX_LENGTH = 19
    CPF_LENGTH = 11
    CNPJ_LENGTH = 14


# =============================================================================
# ERROR MESSAGES
# =============================================================================
class ErrorMessages:
    """Error messages for programmer errors."""

    RULE_NOT_FOUND = "No rule registered under name: {name}"
    NOT_A_CONTAINER = "Cannot apply assoc rules to a value that is not a mapping."
    CANNOT_ASSIGN_PATH = "Cannot set key {key!r} on {type_name}"
    INVALID_INTEGER_ARGUMENT = "Rule '{rule}' expects an integer argument, got {value!r}"
    INVALID_ROUNDING_MODE = "Unknown rounding mode: {mode!r}"
    CATALOG_NOT_FOUND = "Message catalog not found: {path}"
    CATALOG_INVALID = "Message catalog must be a mapping of message keys to templates"
    LOCALE_NOT_FOUND = "Locale '{locale}' not found in message catalog {path}"


# =============================================================================
# ISO CODES
# =============================================================================
CURRENCY_CODES: FrozenSet[str] = frozenset(
    """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB
    BRL BSD BTN BWP BYR BZD CAD CDF CHF CLP CNY COP CRC CUC CUP CVE CZK DJF DKK
    DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD HNL HRK
    HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW KWD KYD
    KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRO MUR MVR MWK MXN
    MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD
    RUB RWF SAR SBD SCR SDG SEK SGD SHP SLL SOS SRD SSP STD SYP SZL THB TJS TMT
    TND TOP TRY TTD TWD TZS UAH UGX USD UYU UZS VEF VND VUV WST XAF XCD XOF XPF
    YER ZAR ZMW
    """.split()
)

COUNTRY_ALPHA2_CODES: FrozenSet[str] = frozenset(
    """
    AF AX AL DZ AS AD AO AI AQ AG AR AM AW AU AT AZ BS BH BD BB BY BE BZ BJ BM
    BT BO BQ BA BW BV BR IO BN BG BF BI CV KH CM CA KY CF TD CL CN CX CC CO KM
    CG CD CK CR CI HR CU CW CY CZ DK DJ DM DO EC EG SV GQ ER EE ET SZ FK FO FJ
    FI FR GF PF TF GA GM GE DE GH GI GR GL GD GP GU GT GG GN GW GY HT HM VA HN
    HK HU IS IN ID IR IQ IE IM IL IT JM JP JE JO KZ KE KI KP KR KW KG LA LV LB
    LS LR LY LI LT LU MO MK MG MW MY MV ML MT MH MQ MR MU YT MX FM MD MC MN ME
    MS MA MZ MM NA NR NP NL NC NZ NI NE NG NU NF MP NO OM PK PW PS PA PG PY PE
    PH PN PL PT PR QA RE RO RU RW BL SH KN LC MF PM VC WS SM ST SA SN RS SC SL
    SG SX SK SI SB SO ZA GS SS ES LK SD SR SJ SE CH SY TW TJ TZ TH TL TG TK TO
    TT TN TR TM TC TV UG UA AE GB US UM UY UZ VU VE VN VG VI WF EH YE ZM ZW
    """.split()
)

COUNTRY_ALPHA3_CODES: FrozenSet[str] = frozenset(
    """
    AFG ALA ALB DZA ASM AND AGO AIA ATA ATG ARG ARM ABW AUS AUT AZE BHS BHR BGD
    BRB BLR BEL BLZ BEN BMU BTN BOL BES BIH BWA BVT BRA IOT BRN BGR BFA BDI CPV
    KHM CMR CAN CYM CAF TCD CHL CHN CXR CCK COL COM COG COD COK CRI CIV HRV CUB
    CUW CYP CZE DNK DJI DMA DOM ECU EGY SLV GNQ ERI EST ETH SWZ FLK FRO FJI FIN
    FRA GUF PYF ATF GAB GMB GEO DEU GHA GIB GRC GRL GRD GLP GUM GTM GGY GIN GNB
    GUY HTI HMD VAT HND HKG HUN ISL IND IDN IRN IRQ IRL IMN ISR ITA JAM JPN JEY
    JOR KAZ KEN KIR PRK KOR KWT KGZ LAO LVA LBN LSO LBR LBY LIE LTU LUX MAC MKD
    MDG MWI MYS MDV MLI MLT MHL MTQ MRT MUS MYT MEX FSM MDA MCO MNG MNE MSR MAR
    MOZ MMR NAM NRU NPL NLD NCL NZL NIC NER NGA NIU NFK MNP NOR OMN PAK PLW PSE
    PAN PNG PRY PER PHL PCN POL PRT PRI QAT REU ROU RUS RWA BLM SHN KNA LCA MAF
    SPM VCT WSM SMR STP SAU SEN SRB SYC SLE SGP SXM SVK SVN SLB SOM ZAF SGS SSD
    ESP LKA SDN SUR SJM SWE CHE SYR TWN TJK TZA THA TLS TGO TKL TON TTO TUN TUR
    TKM TCA TUV UGA UKR ARE GBR USA UMI URY UZB VUT VEN VNM VGB VIR WLF ESH YEM
    ZMB ZWE
    """.split()
)
