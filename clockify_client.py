import json
from collections import namedtuple

import requests

BASE_URL = "https://api.clockify.me/api/v1"
PAGE_SIZE = 5000
NO_RESPONSE = 0

ERROR_MESSAGES = {
    400: "Bad request — check parameters",
    401: "Invalid authentication",
    403: "Invalid authentication",
    404: "Not found",
    429: "Rate limit reached",
    500: "Server error while processing request",
}


def classify_error(status_code):
    return ERROR_MESSAGES.get(status_code, f"internal error: {status_code}")


class ClockifyError(Exception):
    def __init__(self, status_code, message, response=None, detail=None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.response = response
        self.detail = detail

    def __str__(self):
        text = self.message
        if self.status_code:
            text = f"{text} (HTTP {self.status_code})"
        if self.detail:
            text = f"{text}: {self.detail}"
        return text


class Result:
    """
    Outcome of a Clockify call: either a decoded value or a ClockifyError.
    ``status_code`` is the HTTP status of a successful call, when one was made.
    """

    def __init__(self, value=None, error=None, status_code=None):
        self.value = value
        self.error = error
        self.status_code = status_code

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"Result(value={self.value!r})"
        return f"Result(error={self.error!r})"


class Project(namedtuple("Project", ["client_name", "name", "id"])):
    __slots__ = ()

    @classmethod
    def from_api(cls, raw):
        return cls(raw.get("clientName") or None, raw["name"], raw["id"])


class ClockifyClient:
    def __init__(self, api_key, workspace_id, user_id=None, debug=False):
        self.api_key = api_key
        self.workspace_id = workspace_id
        self.user_id = user_id
        self.debug = debug
        self.last_error = None

    def _trace(self, msg):
        if self.debug:
            print(f"[DEBUG] {msg}")

    def _fail(self, error):
        self.last_error = error
        print(f"[ERROR] Clockify request failed: {error}")
        return Result(error=error)

    def request(self, method, path, body=None):
        """
        Perform one blocking call against the Clockify API.

        Never raises: HTTP errors, network errors and undecodable bodies all
        come back as a failed Result and are kept in ``last_error``.
        """
        self.last_error = None
        url = f"{BASE_URL}{path}"
        headers = {
            "Content-Type": "application/json",
            "X-Api-Key": self.api_key
        }
        payload = body if body else None

        self._trace(f"{method} {url}")
        if payload is not None:
            self._trace(f"Payload: {json.dumps(payload)}")

        try:
            response = requests.request(method, url, headers=headers, json=payload)
        except requests.exceptions.RequestException as e:
            return self._fail(ClockifyError(NO_RESPONSE, classify_error(NO_RESPONSE), detail=str(e)))

        if not 200 <= response.status_code < 300:
            status = response.status_code
            return self._fail(ClockifyError(status, classify_error(status), response=response, detail=response.text or None))

        if not response.content:
            return Result(None, status_code=response.status_code)
        try:
            return Result(response.json(), status_code=response.status_code)
        except ValueError as e:
            return self._fail(ClockifyError(response.status_code, "Invalid JSON response", response=response, detail=str(e)))

    def list_projects(self, workspace_id=None, page_size=PAGE_SIZE):
        workspace_id = workspace_id or self.workspace_id
        raw_projects = []
        page = 1

        while True:
            path = f"/workspaces/{workspace_id}/projects?page={page}&page-size={page_size}"
            result = self.request("GET", path)
            if not result.ok:
                return result
            batch = result.value
            if not isinstance(batch, list):
                return self._fail(ClockifyError(result.status_code, "Unexpected response payload",
                                                detail=f"expected a list of projects on page {page}"))
            raw_projects.extend(batch)
            self._trace(f"Fetched page {page}: {len(batch)} projects ({len(raw_projects)} total)")
            if len(batch) < page_size:
                break  # Short page, nothing left
            page += 1

        return Result([Project.from_api(raw) for raw in raw_projects])

    def start_time_entry(self, project_id, description, start):
        payload = {
            "start": start,
            "projectId": project_id,
            "description": description
        }
        return self.request("POST", f"/workspaces/{self.workspace_id}/time-entries", payload)

    def stop_time_entry(self, end):
        """
        Close whatever entry is currently running for the configured user.
        """
        if not self.user_id:
            return self._fail(ClockifyError(NO_RESPONSE, "User ID is not configured",
                                            detail="set CLOCKIFY_USER_ID to stop a timer"))
        payload = {"end": end}
        return self.request("PATCH", f"/workspaces/{self.workspace_id}/user/{self.user_id}/time-entries", payload)
