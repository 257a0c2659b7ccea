import logging
from typing import Any, Dict, List, Optional

import httpx

from resource_manager.client.session import Session

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:8000/api'


class ApiClientError(Exception):
    """The server answered with an error envelope"""

    def __init__(self, status_code: int, message: str, data: Any = None):
        self.status_code = status_code
        self.message = message
        self.data = data
        super().__init__(f"{status_code}: {message}")


class SessionExpired(ApiClientError):
    """No usable token; the caller should log in again"""

    def __init__(self, message: str = "Session expired, please log in again"):
        super().__init__(401, message)


class PermissionDenied(Exception):
    """The signed-in role may not perform this action"""


class ResourceClient:
    """Thin wrapper over the REST API.

    Every method returns the ``data`` member of the response envelope and
    raises ``ApiClientError`` for error envelopes. Protected calls need an
    authenticated ``session``; a 401 from the server invalidates it.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, session: Optional[Session] = None,
                 transport: Optional[httpx.BaseTransport] = None, timeout: float = 10.0):
        self.session = session if session is not None else Session()
        self._http = httpx.Client(base_url=base_url.rstrip('/'), transport=transport, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # --------- Plumbing ---------

    def _request(self, method: str, path: str, auth: bool = True, **kwargs) -> Any:
        headers = kwargs.pop('headers', {})
        if auth:
            if not self.session.is_authenticated():
                self.session.invalidate()
                raise SessionExpired()
            headers['Authorization'] = f'Bearer {self.session.token}'

        response = self._http.request(method, path, headers=headers, **kwargs)
        try:
            body = response.json()
        except ValueError:
            raise ApiClientError(response.status_code, response.text or response.reason_phrase)

        if response.status_code >= 400:
            message = body.get('message', response.reason_phrase) if isinstance(body, dict) else response.reason_phrase
            if auth and response.status_code == 401:
                logger.info("Server rejected token, clearing session")
                self.session.invalidate()
                raise SessionExpired(message)
            raise ApiClientError(response.status_code, message, body.get('data') if isinstance(body, dict) else None)

        return body.get('data') if isinstance(body, dict) else body

    def _require_manager(self, action: str) -> None:
        if not self.session.is_authenticated():
            self.session.invalidate()
            raise SessionExpired()
        if not self.session.is_manager:
            raise PermissionDenied(f"Only managers can {action}")

    # --------- Auth & profile ---------

    def signup(self, name: str, email: str, password: str, role: str) -> Dict[str, Any]:
        return self._request('POST', '/auth/signup', auth=False, json={
            'name': name, 'email': email, 'password': password, 'role': role,
        })

    def login(self, email: str, password: str) -> Session:
        data = self._request('POST', '/auth/login', auth=False, json={'email': email, 'password': password})
        self.session = Session.from_login(data)
        return self.session

    def logout(self) -> None:
        try:
            self._request('POST', '/auth/logout', auth=False)
        finally:
            self.session.invalidate()

    def get_profile(self) -> Dict[str, Any]:
        return self._request('GET', '/auth/profile')

    def update_profile(self, **fields) -> Dict[str, Any]:
        """Send only the given fields, e.g. ``update_profile(maxCapacity=80)``"""
        return self._request('PUT', '/auth/profile', json=fields)

    # --------- Engineers ---------

    def list_engineers(self) -> List[Dict[str, Any]]:
        return self._request('GET', '/engineers')

    def search_engineers(self, term: str) -> List[Dict[str, Any]]:
        """Engineers whose name or any skill contains ``term``, ignoring case"""
        needle = term.strip().lower()
        return [
            e for e in self.list_engineers()
            if needle in e['name'].lower() or any(needle in skill.lower() for skill in e.get('skills') or [])
        ]

    def get_engineer_capacity(self, engineer_id: int) -> Dict[str, Any]:
        return self._request('GET', f'/engineers/{engineer_id}/capacity')

    # --------- Projects ---------

    def list_projects(self) -> List[Dict[str, Any]]:
        try:
            return self._request('GET', '/projects')
        except ApiClientError as e:
            if e.status_code == 404 and e.message == "No projects found":
                return []
            raise

    def get_project(self, project_id: int) -> Dict[str, Any]:
        return self._request('GET', f'/projects/{project_id}')

    def create_project(self, name: str, start_date: str, manager_id: Optional[int] = None,
                       **optional) -> Dict[str, Any]:
        self._require_manager('create projects')
        payload = {
            'name': name,
            'startDate': start_date,
            'managerId': manager_id if manager_id is not None else self.session.user_id,
        }
        payload.update(optional)
        return self._request('POST', '/projects', json=payload)

    # --------- Assignments ---------

    def list_assignments(self) -> List[Dict[str, Any]]:
        return self._request('GET', '/assignments')

    def my_assignments(self) -> List[Dict[str, Any]]:
        """Assignments of the signed-in user"""
        return [a for a in self.list_assignments() if a['engineerId'] == self.session.user_id]

    def get_assignment(self, assignment_id: int) -> Dict[str, Any]:
        return self._request('GET', f'/assignments/{assignment_id}')

    def create_assignment(self, engineer_id: int, project_id: int, allocation_percentage: int,
                          start_date: str, role: str, end_date: Optional[str] = None) -> Dict[str, Any]:
        self._require_manager('create assignments')
        payload = {
            'engineerId': engineer_id,
            'projectId': project_id,
            'allocationPercentage': allocation_percentage,
            'startDate': start_date,
            'role': role,
        }
        if end_date is not None:
            payload['endDate'] = end_date
        return self._request('POST', '/assignments', json=payload)

    def update_assignment(self, assignment_id: int, **fields) -> Dict[str, Any]:
        self._require_manager('update assignments')
        return self._request('PATCH', f'/assignments/{assignment_id}', json=fields)

    def delete_assignment(self, assignment_id: int) -> None:
        self._require_manager('delete assignments')
        self._request('DELETE', f'/assignments/{assignment_id}')
