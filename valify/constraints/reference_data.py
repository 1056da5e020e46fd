"""Reference data: issuer identification number (IIN) prefixes for payment cards.

Prefix ranges follow the publicly documented IIN tables. Order matters: the
table is scanned top to bottom and the first match wins, so narrower prefixes
are listed before the broader ranges they overlap with.
"""

import re
from enum import Enum


class CardIssuer(str, Enum):
    """Card networks recognised by their leading digits."""

    UNKNOWN = "unknown"
    AMERICAN_EXPRESS = "american_express"
    DINERS_CLUB_INTERNATIONAL = "diners_club_international"
    DINERS_CLUB_USA_AND_CANADA = "diners_club_usa_and_canada"
    DISCOVER = "discover"
    UKRCARD = "ukrcard"
    RUPAY = "rupay"
    INTERPAYMENT = "interpayment"
    INSTAPAYMENT = "instapayment"
    JCB = "jcb"
    MAESTRO_UK = "maestro_uk"
    MAESTRO = "maestro"
    DANKORT = "dankort"
    MIR = "mir"
    NPS_PRIDNESTROVIE = "nps_pridnestrovie"
    MASTERCARD = "mastercard"
    TROY = "troy"
    VISA = "visa"
    VISA_ELECTRON = "visa_electron"
    UATP = "uatp"
    VERVE = "verve"
    LANKAPAY = "lankapay"


# ──────────────────────────────────────────────────────────────────────
# IIN PREFIX TABLE (first match wins)
# ──────────────────────────────────────────────────────────────────────

ISSUER_PREFIX_PATTERNS: tuple[tuple[CardIssuer, re.Pattern], ...] = tuple(
    (issuer, re.compile(pattern))
    for issuer, pattern in (
        (CardIssuer.AMERICAN_EXPRESS, r"^3[47]"),
        (CardIssuer.DINERS_CLUB_INTERNATIONAL, r"^(36|30[0-5]|3095|3[89])"),
        (CardIssuer.DINERS_CLUB_USA_AND_CANADA, r"^54"),
        (CardIssuer.LANKAPAY, r"^357111"),
        (CardIssuer.JCB, r"^35(2[89]|[3-8]\d)"),
        (CardIssuer.UKRCARD, r"^604(00[1-9]|0[1-9]\d|1\d\d|200)"),
        (CardIssuer.NPS_PRIDNESTROVIE, r"^6054([0-3]\d|40)"),
        (CardIssuer.VERVE, r"^(506(099|1[0-8]\d|19[0-8])|6500(0[2-9]|1\d|2[0-7]))"),
        (CardIssuer.DANKORT, r"^5019"),
        (CardIssuer.MAESTRO_UK, r"^(6759|676770|676774)"),
        (CardIssuer.MAESTRO, r"^(5018|5020|5038|5893|6304|6759|676[1-3])"),
        (CardIssuer.DISCOVER, r"^(6011|64[4-9]|65|622(12[6-9]|1[3-9]\d|[2-8]\d\d|9[01]\d|92[0-5]))"),
        (CardIssuer.RUPAY, r"^(508[5-9]|60[6-9]|81|82)"),
        (CardIssuer.INTERPAYMENT, r"^636"),
        (CardIssuer.INSTAPAYMENT, r"^63[7-9]"),
        (CardIssuer.MIR, r"^220[0-4]"),
        (CardIssuer.MASTERCARD, r"^(5[1-5]|222[1-9]|22[3-9]\d|2[3-6]\d\d|27[01]\d|2720)"),
        (CardIssuer.TROY, r"^9792"),
        (CardIssuer.VISA_ELECTRON, r"^(4026|417500|4508|4844|491[37])"),
        (CardIssuer.VISA, r"^4"),
        (CardIssuer.UATP, r"^1"),
    )
)
