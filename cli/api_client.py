"""REST API client for sutja server."""

import requests
from typing import Optional


class SutjaAPIClient:
    """Client for communicating with the sutja REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict) -> dict:
        """Make a POST request."""
        data['user_id'] = self.user_id
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def get_question(self) -> dict:
        """Get the current question."""
        return self._get("/api/question")

    def next_question(self, round_id: Optional[int] = None) -> dict:
        """Advance to a new question (no-op if round_id is no longer current)."""
        return self._post("/api/next", {'round_id': round_id})

    def submit_answer(self, answer: str, round_id: Optional[int] = None) -> dict:
        """Submit an answer to the current question."""
        return self._post("/api/answer", {'answer': answer, 'round_id': round_id})

    def get_status(self) -> dict:
        """Get score and settings."""
        return self._get("/api/status")

    def get_settings(self) -> dict:
        """Get active settings."""
        return self._get("/api/settings")

    def update_settings(self, **settings) -> dict:
        """Apply settings (number_system, direction, min_range, max_range)."""
        return self._post("/api/settings", dict(settings))

    def reset(self) -> dict:
        """Zero the score and start over."""
        return self._post("/api/reset", {})

    def convert(self, number: int, system: str = 'sino') -> dict:
        """Convert a number to Korean text."""
        response = self.session.get(f"{self.base_url}/api/convert",
                                    params={'number': number, 'system': system})
        response.raise_for_status()
        return response.json()
