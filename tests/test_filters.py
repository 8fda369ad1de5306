from datetime import datetime, timezone

from flask import render_template_string

from panel.utils.filters import format_expiry, humanize_duration


def test_humanize_duration_filter():
    assert humanize_duration(172800) == '2 day(s)'
    assert humanize_duration('315569260') == 'Lifetime'
    assert humanize_duration(None) == ''
    assert humanize_duration('soon') == 'soon'


def test_format_expiry():
    assert format_expiry(None) == 'Lifetime'
    assert format_expiry(datetime(2026, 3, 1, 12, 5, 9)) == '2026-03-01 12:05:09'
    assert format_expiry('2026-03-01T12:05:09Z') == '2026-03-01 12:05:09'
    assert format_expiry(datetime(2026, 3, 1, tzinfo=timezone.utc)) == '2026-03-01 00:00:00'
    assert format_expiry('not a date') == 'not a date'


def test_filters_registered_on_app(app):
    with app.test_request_context():
        out = render_template_string(
            "{{ 86400|humanize_duration }}|{{ 5|humanize_delay('60') }}|{{ none|format_expiry }}")
    assert out == '1 day(s)|5 minute(s)|Lifetime'


def test_table_defaults_in_templates(app):
    with app.test_request_context():
        out = render_template_string("{{ pagination_window }}/{{ page_size_choices|join(',') }}")
    assert out == '5/10,25,50,100'
