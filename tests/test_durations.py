import pytest

from panel.services.durations import (
    LIFETIME_SECONDS, SECONDS_PER_UNIT, DurationSpec, coerce_magnitude, humanize,
    humanize_delay, parse_unit, to_seconds, unit_choices,
)


def test_unit_constants_match_backend():
    assert SECONDS_PER_UNIT == {
        'second': 1,
        'minute': 60,
        'hour': 3600,
        'day': 86400,
        'week': 604800,
        'month': 2629743,
        'year': 31556926,
        'lifetime': 315569260,
    }


def test_to_seconds_examples():
    assert to_seconds(DurationSpec(magnitude=2, unit='day')) == 172800
    assert to_seconds(DurationSpec(magnitude=1, unit='lifetime')) == 315569260
    assert to_seconds(DurationSpec(magnitude=0, unit='year')) == 0


def test_negative_magnitude_is_clamped():
    assert DurationSpec(magnitude=-3, unit='day').magnitude == 0
    assert to_seconds(DurationSpec(magnitude=-3, unit='day')) == 0


def test_to_seconds_monotonic():
    for unit in SECONDS_PER_UNIT:
        values = [to_seconds(DurationSpec(magnitude=m, unit=unit)) for m in range(5)]
        assert values == sorted(set(values))

    ordered = sorted(SECONDS_PER_UNIT, key=SECONDS_PER_UNIT.get)
    assert ordered[0] == 'second' and ordered[-1] == 'lifetime'
    values = [to_seconds(DurationSpec(magnitude=3, unit=u)) for u in ordered]
    assert values == sorted(set(values))


def test_humanize_boundaries():
    assert humanize(0) == '0 second(s)'
    assert humanize(59) == '59 second(s)'
    assert humanize(60) == '1 minute(s)'
    assert humanize(86400) == '1 day(s)'
    assert humanize(86399) == '23 hour(s)'
    assert humanize(172800) == '2 day(s)'
    assert humanize(604800 * 3) == '3 week(s)'
    assert humanize(2629743) == '1 month(s)'
    assert humanize(31556926 * 2 + 5) == '2 year(s)'


def test_humanize_lifetime():
    assert humanize(to_seconds(DurationSpec(magnitude=1, unit='lifetime'))) == 'Lifetime'
    assert humanize(LIFETIME_SECONDS * 4) == 'Lifetime'
    assert humanize(LIFETIME_SECONDS - 1) == '9 year(s)'


def test_humanize_negative_renders_zero():
    assert humanize(-10) == '0 second(s)'


def test_humanize_delay():
    assert humanize_delay(5, '60') == '5 minute(s)'
    assert humanize_delay(1, 'lifetime') == 'Lifetime'


@pytest.mark.parametrize('raw,expected', [
    ('day', 'day'),
    ('Days', 'day'),
    ('WEEKS', 'week'),
    ('86400', 'day'),
    (2629743, 'month'),
    (' 1 ', 'second'),
    ('Lifetime', 'lifetime'),
])
def test_parse_unit(raw, expected):
    assert parse_unit(raw) == expected


@pytest.mark.parametrize('raw', ['fortnight', '', None, '7', 42, True])
def test_parse_unit_rejects_unknown(raw):
    with pytest.raises(ValueError):
        parse_unit(raw)


def test_unit_choices():
    choices = unit_choices()
    assert choices[0] == ('1', 'Seconds')
    assert choices[-1] == ('315569260', 'Lifetime')
    assert len(choices) == 8

    session = unit_choices('week')
    assert [value for value, _ in session] == ['1', '60', '3600', '86400', '604800']


def test_coerce_magnitude_falls_back_to_default():
    assert coerce_magnitude('12', 20) == 12
    assert coerce_magnitude(' 7 ', 20) == 7
    assert coerce_magnitude('', 20) == 20
    assert coerce_magnitude('abc', 20) == 20
    assert coerce_magnitude(None, 20) == 20
    assert coerce_magnitude('-4', 20) == 20
    # zero is kept unless the field treats it as invalid
    assert coerce_magnitude('0', 7) == 0
    assert coerce_magnitude('0', 20, allow_zero=False) == 20
