"""Fractional order keys: strings that sort by plain comparison and always
leave room for another key between any two of them.

A key is an integer part followed by a fractional part, both written in
base-62 digits (``0-9A-Za-z``, which is also their ASCII order).

The first character of the integer part is a head letter that fixes how many
characters the integer part has. ``a`` means 2 (``a0``..``az``), ``b`` means
3, up to ``z`` with 27. Upper-case heads count the other way for keys below
``a0``: ``Z`` is 2 characters, ``Y`` is 3, down to ``A`` with 27. Because a
longer integer part always carries a later head letter (or an earlier one on
the negative side), comparing keys as strings agrees with comparing them as
numbers.

The fractional part never ends in ``0``, so between ``a0`` and ``a0V`` there
is ``a0G``, between ``a0`` and ``a01`` there is ``a00V``, and so on without
limit. Nothing ever has to be renumbered.
"""

from __future__ import annotations

BASE_62_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_ZERO = BASE_62_DIGITS[0]
_SMALLEST_INTEGER = "A" + _ZERO * 26
_INITIAL_KEY = "a" + _ZERO


# ---------------------------------------------------------------------------
# Digit-string midpoint
# ---------------------------------------------------------------------------


def midpoint(lo: str, hi: str | None, digits: str = BASE_62_DIGITS) -> str:
    """A fractional digit string strictly between lo and hi.

    lo may be "" (zero); hi None means one past the largest digit string.
    Neither may end in the zero digit.
    """
    zero = digits[0]
    if hi is not None and lo >= hi:
        raise ValueError(f"{lo!r} >= {hi!r}")
    if lo[-1:] == zero or (hi and hi[-1:] == zero):
        raise ValueError("trailing zero")

    if hi:
        # Skip the shared prefix, padding lo with zeros
        n = 0
        while (lo[n] if n < len(lo) else zero) == hi[n]:
            n += 1
        if n > 0:
            return hi[:n] + midpoint(lo[n:], hi[n:], digits)

    digit_lo = digits.index(lo[0]) if lo else 0
    digit_hi = digits.index(hi[0]) if hi is not None else len(digits)
    if digit_hi - digit_lo > 1:
        return digits[(digit_lo + digit_hi + 1) // 2]

    # Adjacent first digits
    if hi and len(hi) > 1:
        return hi[:1]
    return digits[digit_lo] + midpoint(lo[1:], None, digits)


# ---------------------------------------------------------------------------
# Integer part
# ---------------------------------------------------------------------------


def integer_length(head: str) -> int:
    if "a" <= head <= "z":
        return ord(head) - ord("a") + 2
    if "A" <= head <= "Z":
        return ord("Z") - ord(head) + 2
    raise ValueError(f"invalid order key head: {head!r}")


def integer_part(key: str) -> str:
    length = integer_length(key[0])
    if length > len(key):
        raise ValueError(f"invalid order key: {key!r}")
    return key[:length]


def validate_order_key(key: str, digits: str = BASE_62_DIGITS) -> None:
    """Raise ValueError unless key is a well-formed order key."""
    if not key:
        raise ValueError("empty order key")
    if key == _SMALLEST_INTEGER:
        raise ValueError(f"invalid order key: {key!r}")
    ipart = integer_part(key)
    if any(ch not in digits for ch in key[1:]):
        raise ValueError(f"invalid order key: {key!r}")
    if key[len(ipart) :][-1:] == digits[0]:
        raise ValueError(f"invalid order key: {key!r}")


def is_valid_order_key(key: str) -> bool:
    try:
        validate_order_key(key)
    except ValueError:
        return False
    return True


def increment_integer(value: str, digits: str = BASE_62_DIGITS) -> str | None:
    """Next integer part, or None past the largest one."""
    head, body = value[0], list(value[1:])
    carry = True
    i = len(body) - 1
    while carry and i >= 0:
        d = digits.index(body[i]) + 1
        if d == len(digits):
            body[i] = digits[0]
        else:
            body[i] = digits[d]
            carry = False
        i -= 1
    if carry:
        if head == "Z":
            return "a" + digits[0]
        if head == "z":
            return None
        head = chr(ord(head) + 1)
        if head > "a":
            body.append(digits[0])
        else:
            body.pop()
    return head + "".join(body)


def decrement_integer(value: str, digits: str = BASE_62_DIGITS) -> str | None:
    """Previous integer part, or None below the smallest one."""
    head, body = value[0], list(value[1:])
    borrow = True
    i = len(body) - 1
    while borrow and i >= 0:
        d = digits.index(body[i]) - 1
        if d == -1:
            body[i] = digits[-1]
        else:
            body[i] = digits[d]
            borrow = False
        i -= 1
    if borrow:
        if head == "a":
            return "Z" + digits[-1]
        if head == "A":
            return None
        head = chr(ord(head) - 1)
        if head < "Z":
            body.append(digits[-1])
        else:
            body.pop()
    return head + "".join(body)


# ---------------------------------------------------------------------------
# Key generation
# ---------------------------------------------------------------------------


def generate_key_between(lo: str | None, hi: str | None, digits: str = BASE_62_DIGITS) -> str:
    """A key strictly between lo and hi. None is unbounded on that side."""
    if lo is not None:
        validate_order_key(lo, digits)
    if hi is not None:
        validate_order_key(hi, digits)
    if lo is not None and hi is not None and lo >= hi:
        raise ValueError(f"{lo!r} >= {hi!r}")

    if lo is None:
        if hi is None:
            return _INITIAL_KEY
        ihi = integer_part(hi)
        fhi = hi[len(ihi) :]
        if ihi == _SMALLEST_INTEGER:
            return ihi + midpoint("", fhi, digits)
        if ihi < hi:
            return ihi
        prev = decrement_integer(ihi, digits)
        if prev is None:
            raise ValueError("cannot decrement any more")
        return prev

    if hi is None:
        ilo = integer_part(lo)
        flo = lo[len(ilo) :]
        nxt = increment_integer(ilo, digits)
        return ilo + midpoint(flo, None, digits) if nxt is None else nxt

    ilo = integer_part(lo)
    flo = lo[len(ilo) :]
    ihi = integer_part(hi)
    fhi = hi[len(ihi) :]
    if ilo == ihi:
        return ilo + midpoint(flo, fhi, digits)
    nxt = increment_integer(ilo, digits)
    if nxt is None:
        raise ValueError("cannot increment any more")
    if nxt < hi:
        return nxt
    return ilo + midpoint(flo, None, digits)


def generate_n_keys_between(
    lo: str | None, hi: str | None, n: int, digits: str = BASE_62_DIGITS
) -> list[str]:
    """n ascending keys strictly between lo and hi, spread across the gap."""
    if n <= 0:
        return []
    if n == 1:
        return [generate_key_between(lo, hi, digits)]

    if hi is None:
        key = generate_key_between(lo, hi, digits)
        keys = [key]
        for _ in range(n - 1):
            key = generate_key_between(key, hi, digits)
            keys.append(key)
        return keys

    if lo is None:
        key = generate_key_between(lo, hi, digits)
        keys = [key]
        for _ in range(n - 1):
            key = generate_key_between(lo, key, digits)
            keys.append(key)
        keys.reverse()
        return keys

    mid = n // 2
    key = generate_key_between(lo, hi, digits)
    return [
        *generate_n_keys_between(lo, key, mid, digits),
        key,
        *generate_n_keys_between(key, hi, n - mid - 1, digits),
    ]


def generate_batch_order_keys(count: int) -> list[str]:
    """count ascending keys for a fresh roadmap: a0, a1, a2, ..."""
    return generate_n_keys_between(None, None, count)
