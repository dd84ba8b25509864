import pytest
from django.contrib.auth import get_user_model

from apps.locations.models import Point

# 2021-01-01T00:00:00Z
BASE_TIMESTAMP = 1609459200


@pytest.fixture(autouse=True)
def exports_root(settings, tmp_path):
    settings.EXPORTS_ROOT = tmp_path / 'exports'
    return settings.EXPORTS_ROOT


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username='alice', email='alice@example.com', password='secret-password'
    )


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(
        username='bob', email='bob@example.com', password='secret-password'
    )


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def make_point(db):
    def make(user, latitude=52.52, longitude=13.405, timestamp=BASE_TIMESTAMP, **kwargs):
        return Point.objects.create(
            user=user,
            latitude=latitude,
            longitude=longitude,
            timestamp=timestamp,
            **kwargs
        )
    return make
