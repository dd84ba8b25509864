import json

from django.urls import reverse

from apps.locations.models import Export, Notification

from .conftest import BASE_TIMESTAMP


class TestMapView:

    def test_redirects_anonymous_users_to_login(self, client, db):
        response = client.get(reverse('locations:map'))

        assert response.status_code == 302
        assert reverse('login') in response.url

    def test_renders_points_in_range(self, auth_client, user, other_user, make_point):
        make_point(user, timestamp=BASE_TIMESTAMP)
        make_point(user, latitude=52.521, timestamp=BASE_TIMESTAMP + 60)
        make_point(user, timestamp=BASE_TIMESTAMP + 86400 * 3)
        make_point(other_user, timestamp=BASE_TIMESTAMP)

        response = auth_client.get(reverse('locations:map'), {
            'start_at': '2021-01-01T00:00:00Z',
            'end_at': '2021-01-01T23:59:59Z',
        })

        assert response.status_code == 200
        map_data = response.context['map_data']
        assert len(map_data['markers']) == 2
        assert len(map_data['polylines']) == 1
        assert response.context['points_count'] == 2
        assert b'id="map-data"' in response.content

    def test_defaults_to_today(self, auth_client, user, make_point):
        make_point(user, timestamp=BASE_TIMESTAMP)

        response = auth_client.get(reverse('locations:map'))

        assert response.status_code == 200
        assert response.context['map_data']['markers'] == []

    def test_invalid_range_falls_back_to_today(self, auth_client):
        response = auth_client.get(reverse('locations:map'), {'start_at': 'whenever'})

        assert response.status_code == 200


class TestExportViews:

    def create(self, client):
        return client.post(reverse('locations:export_create'), {
            'start_at': '2021-01-01T00:00:00',
            'end_at': '2021-01-02T00:00:00',
        })

    def test_index_lists_own_exports(self, auth_client, user, other_user):
        Export.objects.create(user=user, name='mine')
        Export.objects.create(user=other_user, name='theirs')

        response = auth_client.get(reverse('locations:export_index'))

        assert response.status_code == 200
        assert [e.name for e in response.context['exports']] == ['mine']

    def test_create_runs_export(self, auth_client, user, make_point, exports_root):
        for i in range(3):
            make_point(user, timestamp=BASE_TIMESTAMP + i * 60)

        response = self.create(auth_client)

        assert response.status_code == 302
        export = Export.objects.get()
        assert export.name == '2021-01-01_2021-01-02'
        assert export.completed
        assert export.url == 'exports/2021-01-01_2021-01-02.json'
        assert (exports_root / str(user.pk) / '2021-01-01_2021-01-02.json').exists()

    def test_create_rejects_invalid_range(self, auth_client):
        response = auth_client.post(reverse('locations:export_create'), {'start_at': '', 'end_at': 'x'})

        assert response.status_code == 302
        assert not Export.objects.exists()

    def test_download_completed_export(self, auth_client, user, make_point):
        make_point(user, timestamp=BASE_TIMESTAMP)
        self.create(auth_client)
        export = Export.objects.get()

        response = auth_client.get('/' + export.url)

        assert response.status_code == 200
        document = json.loads(b''.join(response.streaming_content))
        assert document['email'] == user.email
        assert len(document['points']) == 1

    def test_download_of_other_users_export(self, client, user, other_user, make_point):
        client.force_login(user)
        make_point(user, timestamp=BASE_TIMESTAMP)
        self.create(client)
        export = Export.objects.get()

        client.force_login(other_user)
        response = client.get('/' + export.url)

        assert response.status_code == 404

    def test_download_returns_own_data_when_both_users_export_the_same_range(
        self, client, user, other_user, make_point, exports_root
    ):
        make_point(user, timestamp=BASE_TIMESTAMP)
        make_point(other_user, timestamp=BASE_TIMESTAMP + 60)
        client.force_login(user)
        self.create(client)
        client.force_login(other_user)
        self.create(client)

        mine = Export.objects.get(user=user)
        theirs = Export.objects.get(user=other_user)
        assert mine.url == theirs.url
        assert (exports_root / str(user.pk) / f'{mine.name}.json').exists()
        assert (exports_root / str(other_user.pk) / f'{theirs.name}.json').exists()

        client.force_login(user)
        response = client.get('/' + mine.url)

        assert response.status_code == 200
        document = json.loads(b''.join(response.streaming_content))
        assert document['email'] == user.email
        assert [p['id'] for p in document['points']] == [
            p.id for p in user.points.all()
        ]

    def test_delete(self, auth_client, user, make_point, exports_root):
        make_point(user, timestamp=BASE_TIMESTAMP)
        self.create(auth_client)
        export = Export.objects.get()

        response = auth_client.post(reverse('locations:export_delete', args=[export.id]))

        assert response.status_code == 302
        assert not Export.objects.exists()
        assert not (exports_root / str(user.pk) / f'{export.name}.json').exists()

    def test_delete_other_users_export(self, auth_client, other_user):
        export = Export.objects.create(user=other_user, name='theirs')

        response = auth_client.post(reverse('locations:export_delete', args=[export.id]))

        assert response.status_code == 404
        assert Export.objects.filter(pk=export.id).exists()


class TestNotificationViews:

    def test_lists_and_marks_read(self, auth_client, user, other_user):
        notification = Notification.objects.create(
            user=user, kind=Notification.Kind.SUCCESS, title='Export finished', content='done'
        )
        Notification.objects.create(user=other_user, kind=Notification.Kind.FAILURE, title='x', content='y')

        response = auth_client.get(reverse('locations:notification_list'), {'unread': 'true'})
        assert response.json()['count'] == 1
        assert response.json()['notifications'][0]['title'] == 'Export finished'

        response = auth_client.post(reverse('locations:notification_read', args=[notification.id]))
        assert response.status_code == 200
        assert response.json()['read_at'] is not None

        response = auth_client.get(reverse('locations:notification_list'), {'unread': 'true'})
        assert response.json()['count'] == 0
