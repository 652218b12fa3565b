import math

import pytest

from interval import interval_string


@pytest.mark.parametrize('value', [math.nan, None, '12', math.inf, True])
def test_never(value):
    assert interval_string(value) == '(never)'


@pytest.mark.parametrize(
    'seconds,expected',
    [
        (0, '0 ms'),
        (0.25, '250 ms'),
        (2, '2000 ms'),
        (-1.5, '-1500 ms'),
        (2.5, '2.5 seconds'),
        (60, '60.0 seconds'),
        (-30, '-30.0 seconds'),
        (61, '1 minute and 1 second'),
        (120, '2 minutes'),
        (150, '2 minutes and 30 seconds'),
        (3600, '1 hour and 0 minutes'),
        (3 * 3600 + 60, '3 hours and 1 minute'),
        (24 * 3600, '24 hours and 0 minutes'),
        (-2 * 3600, '-2 hours and 0 minutes'),
        (25 * 3600, '1 day and 1 hour'),
        (48 * 3600, '2 days'),
        (50 * 3600 + 59, '2 days and 2 hours'),
    ],
)
def test_interval_string(seconds, expected):
    assert interval_string(seconds) == expected
