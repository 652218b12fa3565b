import math


def _plural(count: int, unit: str) -> str:
    return f'{count} {unit}' if count == 1 else f'{count} {unit}s'


def interval_string(seconds: float) -> str:
    """Formats an elapsed time, e.g. the age of a marker file."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        return '(never)'
    if math.isnan(seconds) or math.isinf(seconds):
        return '(never)'
    if -2 <= seconds <= 2:
        return f'{math.floor(seconds * 1000)} ms'

    sign = '-' if seconds < 0 else ''
    s = abs(seconds)
    if s <= 60:
        return f'{sign}{s:.1f} seconds'

    hours = int(s // 3600)
    minutes = int(s // 60)
    if hours <= 0:
        rest = int(s) % 60
        if rest == 0:
            return sign + _plural(minutes, 'minute')
        return f'{sign}{_plural(minutes, "minute")} and {_plural(rest, "second")}'
    if hours <= 24:
        return f'{sign}{_plural(hours, "hour")} and {_plural(minutes % 60, "minute")}'

    days = int(s // 86400)
    if hours % 24 == 0:
        return sign + _plural(days, 'day')
    return f'{sign}{_plural(days, "day")} and {_plural(hours % 24, "hour")}'
