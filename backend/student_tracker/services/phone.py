"""
Phone Service - country code handling for student phone numbers.

Users enter the 8 local digits (e.g. 72254856); the platform stores the
number with the Botswana country code: "+267 72254856".
"""

COUNTRY_CODE = "+267"
COUNTRY_CODE_PREFIX = COUNTRY_CODE + " "


def add_country_code(phone: str) -> str:
    """Prefix the country code unconditionally (create path)."""
    return f"{COUNTRY_CODE_PREFIX}{phone}"


def has_country_code(phone: str) -> bool:
    return bool(phone) and phone.startswith(COUNTRY_CODE)


def ensure_country_code(phone: str) -> str:
    """
    Prefix the country code unless the number already carries it.

    Used on update, where the client may send back the stored value:
        "71234567"      -> "+267 71234567"
        "+267 71234567" -> "+267 71234567"
        "+26771234567"  -> "+267 71234567"
    """
    return add_country_code(strip_country_code(phone))


def strip_country_code(phone: str) -> str:
    """
    Return the local digits of a phone number.

    "+267 71234567" -> "71234567"; values without the prefix are
    returned unchanged.
    """
    if not has_country_code(phone):
        return phone
    return phone[len(COUNTRY_CODE):].lstrip()
