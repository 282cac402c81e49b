"""
Health probe tests.
"""
import pytest


@pytest.mark.django_db
def test_readiness_reports_each_check(api_client):
    response = api_client.get('/health/ready/')

    assert response.status_code == 200
    assert response.json() == {
        'status': 'ready',
        'checks': {'database': {'healthy': True}, 'cache': {'healthy': True}},
    }


def test_liveness(api_client):
    assert api_client.get('/health/live/').json() == {'status': 'alive'}


@pytest.mark.django_db
def test_schema_lists_cart_endpoint(api_client):
    response = api_client.get('/api/schema/', HTTP_ACCEPT='application/vnd.oai.openapi+json')

    assert response.status_code == 200
    assert '/api/v1/cart/' in response.json()['paths']
