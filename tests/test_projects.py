import pytest

NEW_PROJECT = {
    'name': 'Billing Revamp',
    'startDate': '2025-03-01',
}


def test_empty_project_list_signals_not_found(client, manager_headers):
    response = client.get('/api/projects', headers=manager_headers)

    assert response.status_code == 404
    body = response.get_json()
    assert body['status'] == 'error'
    assert body['message'] == 'No projects found'


def test_create_project_with_defaults(client, manager, manager_headers):
    response = client.post('/api/projects', headers=manager_headers,
                           json={**NEW_PROJECT, 'managerId': manager['id']})

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['name'] == 'Billing Revamp'
    assert data['startDate'] == '2025-03-01'
    assert data['endDate'] is None
    assert data['status'] == 'planning'
    assert data['teamSize'] == 1
    assert data['requiredSkills'] == []
    assert data['managerId'] == manager['id']


def test_create_project_with_optional_fields(client, manager, manager_headers):
    response = client.post('/api/projects', headers=manager_headers, json={
        **NEW_PROJECT,
        'managerId': manager['id'],
        'endDate': '2025-09-30T00:00:00.000Z',
        'description': 'Move invoices to the new ledger',
        'requiredSkills': ['Python', 'SQL'],
        'teamSize': 3,
        'status': 'active',
    })

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['endDate'] == '2025-09-30'
    assert data['requiredSkills'] == ['Python', 'SQL']
    assert data['teamSize'] == 3
    assert data['status'] == 'active'


@pytest.mark.parametrize('missing', ['name', 'startDate', 'managerId'])
def test_create_project_requires_fields(client, manager, manager_headers, missing):
    payload = {**NEW_PROJECT, 'managerId': manager['id']}
    payload.pop(missing)

    response = client.post('/api/projects', headers=manager_headers, json=payload)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Project name, start date & managerId are required'


def test_create_project_manager_must_be_a_manager(client, engineer, manager_headers):
    response = client.post('/api/projects', headers=manager_headers,
                           json={**NEW_PROJECT, 'managerId': engineer['id']})
    assert response.status_code == 400


@pytest.mark.parametrize('extra', [
    {'endDate': '2025-01-01'},
    {'status': 'cancelled'},
    {'teamSize': 0},
    {'startDate': '03/01/2025'},
])
def test_create_project_rejects_invalid_values(client, manager, manager_headers, extra):
    response = client.post('/api/projects', headers=manager_headers,
                           json={**NEW_PROJECT, 'managerId': manager['id'], **extra})
    assert response.status_code == 400


def test_list_and_get_project(client, project, manager_headers):
    listing = client.get('/api/projects', headers=manager_headers)
    assert listing.status_code == 200
    assert [p['id'] for p in listing.get_json()['data']] == [project['id']]

    response = client.get(f"/api/projects/{project['id']}", headers=manager_headers)
    assert response.status_code == 200
    assert response.get_json()['data']['name'] == project['name']


def test_get_missing_project(client, manager_headers):
    response = client.get('/api/projects/4242', headers=manager_headers)

    assert response.status_code == 404
    assert response.get_json()['message'] == 'Project not found'


def test_projects_require_token(client):
    assert client.get('/api/projects').status_code == 401
    assert client.post('/api/projects', json=NEW_PROJECT).status_code == 401
