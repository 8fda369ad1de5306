import os
from datetime import datetime
import pytest

# Config requires a secret key; tests never read it
os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from panel import create_app


@pytest.fixture
def app():
    """Create and configure a test app."""
    app = create_app()
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def users():
    """25 user records as returned by the users endpoint."""
    return [
        {
            'username': f'user{i:02d}',
            'email': f'user{i:02d}@example.com',
            'hwid': None if i % 5 == 0 else f'HWID-{i:04d}',
            'lastLogin': None if i % 4 == 0 else datetime(2026, 1, i),
        }
        for i in range(1, 26)
    ]


@pytest.fixture
def licenses():
    """A small license set with mixed field types."""
    return [
        {'key': 'AAAA-1111', 'level': 2, 'duration': 86400, 'note': 'Reseller batch', 'expiry': None},
        {'key': 'BBBB-2222', 'level': 1, 'duration': 2629743, 'note': None,
         'expiry': datetime(2026, 3, 1, 12, 0)},
        {'key': 'cccc-3333', 'level': 3, 'duration': 315569260, 'note': 'lifetime key',
         'expiry': datetime(2026, 2, 1, 8, 30)},
    ]
