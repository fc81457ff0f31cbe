import re

_PARSE_PATTERN = re.compile(r'(\d+d)?\s*(\d+h)?\s*(\d+m)?\s*(\d+s)?', re.IGNORECASE)
_VALIDATE_PATTERN = re.compile(r'^(\d+d\s*)?(\d+h\s*)?(\d+m\s*)?(\d+s\s*)?$', re.IGNORECASE)

FORMAT_HINT = '1h 45m or 2d 1h 45m 35s'


def validate_duration(text: str) -> bool:
    """Whole-string check of a duration expression.

    An empty string is accepted here, the "required" check is a separate step.
    """
    return _VALIDATE_PATTERN.match(text.strip()) is not None


def parse_duration(text: str) -> float:
    """Converts ``"1d 2h 30m 15s"`` like expression to fractional hours.

    Only a prefix has to match, anything after it is ignored.
    """
    days, hours, minutes, seconds = (int(group[:-1]) if group else 0
                                     for group in _PARSE_PATTERN.match(text).groups())
    return days * 24 + hours + minutes / 60 + seconds / 3600
