"""
printf-style message formatting

Formats a message template with positional arguments and writes the result
piece by piece to a text buffer. Directive syntax:

    %[index$][flags][width][.precision]conversion

Supported conversions:
    s S      string (str() of the argument)
    d        decimal integer
    x X o    hexadecimal / octal integer
    f e E g G  floating point
    c C      character (1-char string or code point)
    b B      boolean ("true"/"false")
    h H      hash code in hexadecimal
    t T      date/time, followed by a suffix character (see TIME_CONVERSIONS)
    %        literal percent sign
    n        line separator

Ordinary directives consume arguments left to right. ``%2$s`` selects an
argument explicitly and ``%<s`` reuses the previous argument; neither moves
the ordinary cursor. Arguments left over after the template is consumed are
ignored.
"""

from __future__ import annotations
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, Optional, Sequence, TextIO
import os
import re


class MessageFormatError(ValueError):
    """Raised when a template and its arguments are incompatible."""


class MissingFormatArgumentError(MessageFormatError):
    """A directive refers to an argument that was not supplied."""

    def __init__(self, directive: str):
        self.directive = directive
        super().__init__(f"Format specifier '{directive}' has no matching argument")


class IllegalFormatConversionError(MessageFormatError):
    """An argument's type does not fit the directive's conversion."""

    def __init__(self, conversion: str, arg: Any):
        self.conversion = conversion
        self.arg_type = type(arg)
        super().__init__(f"%{conversion} != {type(arg).__name__}")


class UnknownFormatConversionError(MessageFormatError):
    """The template contains a conversion character that is not supported."""

    def __init__(self, conversion: str):
        self.conversion = conversion
        super().__init__(f"Conversion = '{conversion}'")


class FormatFlagsError(MessageFormatError):
    """Flags, width or precision are not valid for the conversion."""


_DIRECTIVE = re.compile(
    r"%(?:(?P<index>\d+)\$)?"
    r"(?P<flags>[-#+ 0,(<]*)"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<time>[tT])?"
    r"(?P<conversion>.)?",
    re.DOTALL,
)

_GENERAL = "sSbBhH"
_INTEGRAL = "dxXo"
_FLOATING = "feEgG"
_CHARACTER = "cC"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

TIME_CONVERSIONS = "HIklMSLNpzZsQBbhAaCYyjmdeRTrDFc"


class _Directive:
    """One parsed ``%`` directive."""

    __slots__ = ("text", "index", "flags", "width", "precision", "time", "conversion")

    def __init__(self, match: "re.Match[str]"):
        self.text = match.group(0)
        index = match.group("index")
        self.index = int(index) if index is not None else None
        self.flags = match.group("flags") or ""
        width = match.group("width")
        self.width = int(width) if width is not None else None
        precision = match.group("precision")
        self.precision = int(precision) if precision is not None else None
        self.time = match.group("time")
        self.conversion = match.group("conversion")

    @property
    def upper(self) -> bool:
        if self.time is not None:
            return self.time == "T"
        return self.conversion in "SBHXCEG"


def format_message(template: str, args: Sequence[Any], out: TextIO) -> None:
    """
    Format a template with positional arguments.

    Literal text and each converted directive are written to ``out`` as
    they are produced, so a failure part way through leaves partial output
    behind for the caller to discard.

    Args:
        template: printf-style template
        args: Positional arguments
        out: Text buffer receiving the output

    Raises:
        MessageFormatError: If the template is malformed or an argument
            does not fit its directive
    """
    position = 0
    ordinary = 0
    last: Optional[int] = None

    for match in _DIRECTIVE.finditer(template):
        if match.start() > position:
            out.write(template[position:match.start()])
        position = match.end()

        directive = _Directive(match)
        conversion = directive.conversion
        if conversion is None:
            raise UnknownFormatConversionError("%")

        if directive.time is None and conversion == "%":
            _check_no_precision(directive)
            out.write(_justify("%", directive))
            continue
        if directive.time is None and conversion == "n":
            if directive.flags or directive.width is not None or directive.precision is not None:
                raise FormatFlagsError(f"Illegal flags or width for {directive.text!r}")
            out.write(os.linesep)
            continue
        if directive.time is None and conversion not in _GENERAL + _INTEGRAL + _FLOATING + _CHARACTER:
            raise UnknownFormatConversionError(conversion)
        if directive.time is not None and conversion not in TIME_CONVERSIONS:
            raise UnknownFormatConversionError(directive.time + conversion)

        if "<" in directive.flags:
            if last is None:
                raise MissingFormatArgumentError(directive.text)
            arg_index = last
        elif directive.index is not None:
            if directive.index == 0:
                raise MessageFormatError(f"Illegal argument index in {directive.text!r}")
            arg_index = directive.index - 1
        else:
            arg_index = ordinary
            ordinary += 1

        if arg_index >= len(args):
            raise MissingFormatArgumentError(directive.text)
        last = arg_index

        out.write(_convert(directive, args[arg_index]))

    if position < len(template):
        out.write(template[position:])


def _convert(directive: _Directive, arg: Any) -> str:
    _check_justify_flags(directive)
    if directive.time is not None:
        text = _convert_time(directive, arg)
    elif directive.conversion in _GENERAL:
        text = _convert_general(directive, arg)
    elif directive.conversion in _CHARACTER:
        text = _convert_character(directive, arg)
    elif arg is None:
        text = "None"
    elif directive.conversion in _INTEGRAL:
        text = _convert_integer(directive, arg)
    else:
        text = _convert_float(directive, arg)

    if directive.upper:
        text = text.upper()
    return _justify(text, directive)


def _convert_general(directive: _Directive, arg: Any) -> str:
    _check_flags(directive, "-")
    conversion = directive.conversion.lower()
    if conversion == "b":
        if isinstance(arg, bool):
            text = "true" if arg else "false"
        else:
            text = "false" if arg is None else "true"
    elif conversion == "h":
        text = "None" if arg is None else format(hash(arg) & 0xFFFFFFFF, "x")
    else:
        text = str(arg)
    if directive.precision is not None:
        text = text[:directive.precision]
    return text


def _convert_character(directive: _Directive, arg: Any) -> str:
    _check_flags(directive, "-")
    _check_no_precision(directive)
    if arg is None:
        return "None"
    if isinstance(arg, str) and len(arg) == 1:
        return arg
    if isinstance(arg, int) and not isinstance(arg, bool):
        try:
            return chr(arg)
        except (ValueError, OverflowError):
            raise MessageFormatError(f"Illegal code point: {arg}") from None
    raise IllegalFormatConversionError(directive.conversion, arg)


def _convert_integer(directive: _Directive, arg: Any) -> str:
    _check_no_precision(directive)
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise IllegalFormatConversionError(directive.conversion, arg)

    conversion = directive.conversion
    if conversion == "d":
        _check_flags(directive, "-+ 0,(")
        digits = format(abs(arg), "," if "," in directive.flags else "")
    else:
        _check_flags(directive, "-#0(")
        digits = format(abs(arg), "o" if conversion == "o" else "x")
        if "#" in directive.flags:
            digits = ("0" if conversion == "o" else "0x") + digits
    return _apply_sign(digits, arg < 0, directive)


def _convert_float(directive: _Directive, arg: Any) -> str:
    if isinstance(arg, bool) or not isinstance(arg, (int, float, Decimal)):
        raise IllegalFormatConversionError(directive.conversion, arg)
    _check_flags(directive, "-+ 0,(" if directive.conversion in "fgG" else "-+ 0(")

    precision = 6 if directive.precision is None else directive.precision
    conversion = directive.conversion.lower()
    if conversion == "g" and precision == 0:
        precision = 1
    grouping = "," if "," in directive.flags else ""
    value = abs(arg)
    digits = format(value, f"{grouping}.{precision}{conversion}")
    negative = arg < 0 or (isinstance(arg, float) and str(arg).startswith("-"))
    return _apply_sign(digits, negative, directive)


def _as_datetime(arg: Any, conversion: str) -> datetime:
    if isinstance(arg, datetime):
        return arg
    if isinstance(arg, date):
        return datetime(arg.year, arg.month, arg.day)
    if isinstance(arg, time):
        return datetime.combine(date(1970, 1, 1), arg)
    if isinstance(arg, (int, float)) and not isinstance(arg, bool):
        # Epoch milliseconds
        return datetime.fromtimestamp(arg / 1000, tz=timezone.utc)
    raise IllegalFormatConversionError("t" + conversion, arg)


def _convert_time(directive: _Directive, arg: Any) -> str:
    _check_flags(directive, "-")
    _check_no_precision(directive)
    if arg is None:
        return "None"
    return _time_field(_as_datetime(arg, directive.conversion), directive.conversion, arg)


def _time_field(dt: datetime, conversion: str, arg: Any) -> str:
    hour12 = dt.hour % 12 or 12
    if conversion == "H":
        return f"{dt.hour:02d}"
    if conversion == "I":
        return f"{hour12:02d}"
    if conversion == "k":
        return str(dt.hour)
    if conversion == "l":
        return str(hour12)
    if conversion == "M":
        return f"{dt.minute:02d}"
    if conversion == "S":
        return f"{dt.second:02d}"
    if conversion == "L":
        return f"{dt.microsecond // 1000:03d}"
    if conversion == "N":
        return f"{dt.microsecond * 1000:09d}"
    if conversion == "p":
        return "am" if dt.hour < 12 else "pm"
    if conversion == "z":
        offset = dt.utcoffset()
        if offset is None:
            raise IllegalFormatConversionError("tz", arg)
        minutes = int(offset.total_seconds()) // 60
        sign = "-" if minutes < 0 else "+"
        return f"{sign}{abs(minutes) // 60:02d}{abs(minutes) % 60:02d}"
    if conversion == "Z":
        name = dt.tzname()
        if name is None:
            raise IllegalFormatConversionError("tZ", arg)
        return name
    if conversion == "s":
        return str(int(dt.timestamp()))
    if conversion == "Q":
        return str(int(dt.timestamp() * 1000))
    if conversion == "B":
        return MONTH_NAMES[dt.month - 1]
    if conversion in "bh":
        return MONTH_NAMES[dt.month - 1][:3]
    if conversion == "A":
        return WEEKDAY_NAMES[dt.weekday()]
    if conversion == "a":
        return WEEKDAY_NAMES[dt.weekday()][:3]
    if conversion == "C":
        return f"{dt.year // 100:02d}"
    if conversion == "Y":
        return f"{dt.year:04d}"
    if conversion == "y":
        return f"{dt.year % 100:02d}"
    if conversion == "j":
        return f"{dt.timetuple().tm_yday:03d}"
    if conversion == "m":
        return f"{dt.month:02d}"
    if conversion == "d":
        return f"{dt.day:02d}"
    if conversion == "e":
        return str(dt.day)
    if conversion == "R":
        return f"{dt.hour:02d}:{dt.minute:02d}"
    if conversion == "T":
        return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    if conversion == "r":
        return f"{hour12:02d}:{dt.minute:02d}:{dt.second:02d} {'AM' if dt.hour < 12 else 'PM'}"
    if conversion == "D":
        return f"{dt.month:02d}/{dt.day:02d}/{dt.year % 100:02d}"
    if conversion == "F":
        return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
    # "c": naive values have no zone to print
    parts = [
        WEEKDAY_NAMES[dt.weekday()][:3],
        MONTH_NAMES[dt.month - 1][:3],
        f"{dt.day:02d}",
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}",
    ]
    if dt.tzname() is not None:
        parts.append(dt.tzname())
    parts.append(f"{dt.year:04d}")
    return " ".join(parts)


def _apply_sign(digits: str, negative: bool, directive: _Directive) -> str:
    flags = directive.flags
    if negative:
        if "(" in flags:
            prefix, suffix = "(", ")"
        else:
            prefix, suffix = "-", ""
    elif "+" in flags:
        prefix, suffix = "+", ""
    elif " " in flags:
        prefix, suffix = " ", ""
    else:
        prefix, suffix = "", ""

    if "0" in flags:
        fill = directive.width - len(prefix) - len(suffix) - len(digits)
        if fill > 0:
            if digits.startswith("0x"):
                digits = "0x" + "0" * fill + digits[2:]
            else:
                digits = "0" * fill + digits
    return prefix + digits + suffix


def _justify(text: str, directive: _Directive) -> str:
    width = directive.width
    if width is None or len(text) >= width:
        return text
    if "-" in directive.flags:
        return text.ljust(width)
    return text.rjust(width)


def _check_flags(directive: _Directive, allowed: str) -> None:
    for flag in directive.flags:
        if flag != "<" and flag not in allowed:
            raise FormatFlagsError(
                f"Flag '{flag}' is not valid for conversion in {directive.text!r}"
            )


def _check_justify_flags(directive: _Directive) -> None:
    flags = directive.flags
    if ("-" in flags or "0" in flags) and directive.width is None:
        raise FormatFlagsError(f"Missing width in {directive.text!r}")
    if "-" in flags and "0" in flags:
        raise FormatFlagsError(f"Flags '-' and '0' are exclusive in {directive.text!r}")
    if "+" in flags and " " in flags:
        raise FormatFlagsError(f"Flags '+' and ' ' are exclusive in {directive.text!r}")


def _check_no_precision(directive: _Directive) -> None:
    if directive.precision is not None:
        raise FormatFlagsError(f"Precision is not allowed in {directive.text!r}")
