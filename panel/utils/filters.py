"""Jinja filters for durations and expiry dates in console tables."""

from datetime import datetime
import logging

from panel.services.durations import humanize, humanize_delay

logger = logging.getLogger(__name__)

EXPIRY_FORMAT = '%Y-%m-%d %H:%M:%S'


def humanize_duration(seconds):
    """Template filter: 172800 -> '2 day(s)'. Empty for missing values."""
    if seconds is None or seconds == '':
        return ''
    try:
        return humanize(int(seconds))
    except (TypeError, ValueError):
        logger.debug(f"humanize_duration: not a number: {seconds!r}")
        return str(seconds)


def format_expiry(value):
    """Render an expiry date; a missing expiry means the key never expires.

    Accepts datetimes or ISO strings as returned by the API (trailing 'Z'
    allowed).
    """
    if value is None or value == '':
        return 'Lifetime'
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            logger.debug(f"format_expiry: unparseable date {value!r}")
            return value
    return value.strftime(EXPIRY_FORMAT)


def register_filters(app):
    """Register the console template filters on a Flask app."""
    app.add_template_filter(humanize_duration, 'humanize_duration')
    app.add_template_filter(humanize_delay, 'humanize_delay')
    app.add_template_filter(format_expiry, 'format_expiry')
